"""
Static catalog of device viewport profiles.

Dimensions taken from http://mydevice.io/devices/ and the Bootstrap grid
container widths. The table is meant to be replaced wholesale when it goes
stale rather than edited entry by entry.
"""

from typing import Dict, Tuple

from imgix_srcset.models import DeviceFamily, DeviceProfile


def _profile(name: str, family: DeviceFamily, css_width: int, dpr: float) -> DeviceProfile:
    return DeviceProfile(name=name, family=family, css_width=css_width, device_pixel_ratio=dpr)


# Phones
IPHONE = _profile("iphone", DeviceFamily.PHONE, 320, 1)
IPHONE_4 = _profile("iphone_4", DeviceFamily.PHONE, 320, 2)
IPHONE_6 = _profile("iphone_6", DeviceFamily.PHONE, 375, 2)
LG_G3 = _profile("lg_g3", DeviceFamily.PHONE, 360, 4)

# Phablets
IPHONE_6_PLUS = _profile("iphone_6_plus", DeviceFamily.PHABLET, 414, 3)
IPHONE_6_PLUS_LANDSCAPE = _profile("iphone_6_plus_landscape", DeviceFamily.PHABLET, 736, 3)
MOTO_NEXUS_6 = _profile("moto_nexus_6", DeviceFamily.PHABLET, 412, 3.5)
MOTO_NEXUS_6_LANDSCAPE = _profile("moto_nexus_6_landscape", DeviceFamily.PHABLET, 690, 3.5)
LUMIA_1520 = _profile("lumia_1520", DeviceFamily.PHABLET, 432, 2.5)
LUMIA_1520_LANDSCAPE = _profile("lumia_1520_landscape", DeviceFamily.PHABLET, 768, 2.5)
GALAXY_NOTE_3 = _profile("galaxy_note_3", DeviceFamily.PHABLET, 360, 3)
GALAXY_NOTE_3_LANDSCAPE = _profile("galaxy_note_3_landscape", DeviceFamily.PHABLET, 640, 3)
GALAXY_NOTE_4 = _profile("galaxy_note_4", DeviceFamily.PHABLET, 360, 4)
GALAXY_NOTE_4_LANDSCAPE = _profile("galaxy_note_4_landscape", DeviceFamily.PHABLET, 640, 4)

# Tablets
IPAD = _profile("ipad", DeviceFamily.TABLET, 768, 1)
IPAD_LANDSCAPE = _profile("ipad_landscape", DeviceFamily.TABLET, 1024, 1)
IPAD_3 = _profile("ipad_3", DeviceFamily.TABLET, 768, 2)
IPAD_3_LANDSCAPE = _profile("ipad_3_landscape", DeviceFamily.TABLET, 1024, 2)
IPAD_PRO = _profile("ipad_pro", DeviceFamily.TABLET, 1024, 2)
IPAD_PRO_LANDSCAPE = _profile("ipad_pro_landscape", DeviceFamily.TABLET, 1366, 2)

# Bootstrap container widths
BOOTSTRAP_SM = _profile("bootstrap_sm", DeviceFamily.FRAMEWORK, 576, 1)
BOOTSTRAP_MD = _profile("bootstrap_md", DeviceFamily.FRAMEWORK, 720, 1)
BOOTSTRAP_LG = _profile("bootstrap_lg", DeviceFamily.FRAMEWORK, 940, 1)
BOOTSTRAP_XL = _profile("bootstrap_xl", DeviceFamily.FRAMEWORK, 1140, 1)


def phones() -> Tuple[DeviceProfile, ...]:
    return (IPHONE, IPHONE_4, IPHONE_6, LG_G3)


def phablets() -> Tuple[DeviceProfile, ...]:
    return (
        IPHONE_6_PLUS,
        IPHONE_6_PLUS_LANDSCAPE,
        MOTO_NEXUS_6,
        MOTO_NEXUS_6_LANDSCAPE,
        LUMIA_1520,
        LUMIA_1520_LANDSCAPE,
        GALAXY_NOTE_3,
        GALAXY_NOTE_3_LANDSCAPE,
        GALAXY_NOTE_4,
        GALAXY_NOTE_4_LANDSCAPE,
    )


def tablets() -> Tuple[DeviceProfile, ...]:
    return (
        IPAD,
        IPAD_LANDSCAPE,
        IPAD_3,
        IPAD_3_LANDSCAPE,
        IPAD_PRO,
        IPAD_PRO_LANDSCAPE,
    )


def framework_breakpoints() -> Tuple[DeviceProfile, ...]:
    """
    Framework container widths at 1x, followed by the same widths at 2x.

    The 2x entries are new profiles; the 1x constants are left untouched.
    """
    breaks = (BOOTSTRAP_SM, BOOTSTRAP_MD, BOOTSTRAP_LG, BOOTSTRAP_XL)
    retina = tuple(b.with_ratio(2, name=f"{b.name}_2x") for b in breaks)
    return breaks + retina


def devices_by_family() -> Dict[DeviceFamily, Tuple[DeviceProfile, ...]]:
    """Catalog grouped by family, in catalog order."""
    return {
        DeviceFamily.PHONE: phones(),
        DeviceFamily.PHABLET: phablets(),
        DeviceFamily.TABLET: tablets(),
        DeviceFamily.FRAMEWORK: framework_breakpoints(),
    }


def devices() -> Tuple[DeviceProfile, ...]:
    """Flattened catalog: phones, phablets, tablets, then framework breakpoints."""
    return phones() + phablets() + tablets() + framework_breakpoints()
