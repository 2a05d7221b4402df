# src/palette_intelligence/cli.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    from .engine.color.constants import AUDIENCES, CULTURAL_CONTEXTS, INDUSTRIES, STYLES

    parser = argparse.ArgumentParser(
        prog="palette-intelligence",
        description="Generate an accessible color palette from a base color and write it as design tokens.",
    )
    parser.add_argument("base_color", nargs="?", help="Base color as hex, e.g. #3b82f6")
    parser.add_argument("--style", choices=STYLES, default="professional")
    parser.add_argument("--industry", default="tech", help=f"One of: {', '.join(INDUSTRIES)}")
    parser.add_argument("--audience", default="professionals", help=f"One of: {', '.join(AUDIENCES)}")
    parser.add_argument("--cultural", default="global", help=f"One of: {', '.join(CULTURAL_CONTEXTS)}")
    parser.add_argument("--medium", default="web")
    parser.add_argument("--high-contrast", action="store_true", dest="high_contrast")
    parser.add_argument("--size", type=int, choices=(9, 10, 11), default=9, help="Number of scale steps")
    parser.add_argument("--format", default=None, help="Token format (see --list-formats)")
    parser.add_argument("--namespace", default=None, help="Token namespace (default: ai-generated)")
    parser.add_argument("--output", "-o", default=None, help="Write the token document to this path")
    parser.add_argument("--list-formats", action="store_true", dest="list_formats")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None):
    """CLI: build a palette request, run formatted generation, print or write the tokens."""
    from .engine.color.constants import STYLE_TO_EMOTION
    from .engine.errors import AllProvidersFailed, PaletteError
    from .engine.general.utils.log import enable_topics
    from .engine.orchestrator import PaletteOrchestrator
    from .engine.tokens.formats import list_available_formats
    from .engine.types import DesignContext, PaletteRequest

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    if args.debug:
        enable_topics("all")

    if args.list_formats:
        print("Available token formats:\n")
        print(list_available_formats())
        return 0

    if not args.base_color:
        parser.error("base_color is required unless --list-formats is given")

    stage = "request"
    try:
        context = DesignContext.from_mapping(
            {
                "industry": args.industry,
                "audience": args.audience,
                "cultural": args.cultural,
                "medium": args.medium,
                "accessibility": "high-contrast" if args.high_contrast else "standard",
                "emotional": STYLE_TO_EMOTION.get(args.style),
            }
        )
        request = PaletteRequest(
            base_color=args.base_color,
            style=args.style,
            context=context,
            accessibility=True,
            size=args.size,
            format=args.format,
            namespace=args.namespace,
        )

        stage = "generation"
        result = PaletteOrchestrator().generate_formatted_palette(request, output_path_hint=args.output)

        stage = "output"
        payload = json.dumps(result.document, indent=2, ensure_ascii=False)
        if args.output:
            out = Path(args.output)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(payload + "\n", encoding="utf-8")
            print(f"Wrote {result.descriptor.display_name} tokens to {out}")
        else:
            print(payload)

        report = result.palette.metadata.accessibility
        meta = result.palette.metadata
        print(f"\nProvider: {meta.provider} (confidence {meta.confidence:.2f})", file=sys.stderr)
        print(f"Reasoning: {result.reasoning}", file=sys.stderr)
        if report is not None:
            print(f"Accessibility: score {report.score}/100, WCAG {report.wcag_compliance}", file=sys.stderr)
            for rec in report.recommendations:
                print(f"  [{rec.priority}] {rec.issue}", file=sys.stderr)
    except AllProvidersFailed as e:
        print(f"Error during {stage}: {e}", file=sys.stderr)
        for d in e.diagnostics:
            print(f"  - {d}", file=sys.stderr)
        return 1
    except (PaletteError, ValueError, OSError) as e:
        print(f"Error during {stage}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
