#!/usr/bin/env python3
"""
Command-line interface for responsive imgix image markup.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from imgix_srcset.io.config_loader import load_render_config
from imgix_srcset.models import RenderMode
from imgix_srcset.rendering.markup_renderer import MarkupRenderer
from imgix_srcset.rendering.tag_parser import parse_image_markup
from imgix_srcset.templating.image_tag import expand_image_tags, find_image_tags
from imgix_srcset.widths.calculator import WidthCalculator

# Load environment variables
load_dotenv()


def _config_from_args(args):
    """Build a RenderConfig from common CLI flags."""
    mode = RenderMode.PRODUCTION if args.production else None
    config = load_render_config(site_config_path=args.site_config, mode=mode)
    if getattr(args, "source", None):
        config = config.model_copy(update={"cdn_host": args.source})
    return config


def cmd_widths(args):
    """Print breakpoint widths."""
    calculator = WidthCalculator()

    if args.devices:
        rows = [
            {
                "name": device.name,
                "family": device.family.value,
                "css_width": device.css_width,
                "device_pixel_ratio": device.device_pixel_ratio,
                "physical_width": width,
            }
            for device, width in zip(calculator.devices, calculator.device_widths())
        ]
        if args.json:
            print(json.dumps(rows, indent=2))
        else:
            for row in rows:
                print(
                    f"{row['family']:<10} {row['name']:<26} "
                    f"{row['css_width']:>5} x {row['device_pixel_ratio']:<4} = {row['physical_width']}"
                )
        return 0

    widths = calculator.compute_breakpoints()
    if args.json:
        print(json.dumps(widths))
    else:
        print(f"📏 {len(widths)} widths ({widths[0]}-{widths[-1]}px)")
        print(", ".join(str(w) for w in widths))
    return 0


def cmd_render(args):
    """Render markup for a single image reference."""
    config = _config_from_args(args)
    renderer = MarkupRenderer()
    print(renderer.render(args.reference, config))
    return 0


def cmd_expand(args):
    """Expand image tags in a template file."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"❌ Error: Input file not found: {input_path}")
        return 1

    content = input_path.read_text(encoding="utf-8")
    references = find_image_tags(content)
    config = _config_from_args(args)

    expanded = expand_image_tags(content, config)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(expanded, encoding="utf-8")
        print(f"✅ Expanded {len(references)} image tag(s) ({config.mode.value})")
        print(f"📄 Output: {output_path}")
    else:
        sys.stdout.write(expanded)
    return 0


def cmd_inspect(args):
    """Print the responsive attributes of rendered markup."""
    source = args.html
    candidate_path = Path(source)
    if not source.lstrip().startswith("<") and candidate_path.exists():
        source = candidate_path.read_text(encoding="utf-8")

    parsed = parse_image_markup(source)

    if args.json:
        print(parsed.model_dump_json(indent=2))
        return 0

    print(f"🖼️  src:   {parsed.src}")
    print(f"📐 sizes: {parsed.sizes}")
    print(f"📏 srcset: {len(parsed.srcset)} candidate(s)")
    for candidate in parsed.srcset:
        print(f"   {candidate.width:>5}w  {candidate.url}")
    return 0


def _add_config_arguments(parser):
    parser.add_argument("--production", action="store_true", help="Render in production mode")
    parser.add_argument("--site-config", help="Path to JSON site config with an 'imgix' section")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Responsive imgix <img> markup from device breakpoints",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Widths command
    widths_parser = subparsers.add_parser("widths", help="Print breakpoint widths")
    widths_parser.add_argument("--json", action="store_true", help="Output JSON")
    widths_parser.add_argument("--devices", action="store_true", help="Show per-device widths")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render markup for an image reference")
    render_parser.add_argument("reference", help="Image path or URL")
    render_parser.add_argument("--source", help="CDN host (overrides config)")
    _add_config_arguments(render_parser)

    # Expand command
    expand_parser = subparsers.add_parser("expand", help="Expand image tags in a file")
    expand_parser.add_argument("--input", "-i", required=True, help="Template file")
    expand_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    expand_parser.add_argument("--source", help="CDN host (overrides config)")
    _add_config_arguments(expand_parser)

    # Inspect command
    inspect_parser = subparsers.add_parser("inspect", help="Inspect rendered markup")
    inspect_parser.add_argument("--html", required=True, help="Markup string or path to HTML file")
    inspect_parser.add_argument("--json", action="store_true", help="Output JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "widths":
            return cmd_widths(args)
        elif args.command == "render":
            return cmd_render(args)
        elif args.command == "expand":
            return cmd_expand(args)
        elif args.command == "inspect":
            return cmd_inspect(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
