import argparse
import sys
from dataclasses import replace

from ..config import load_settings
from .config import ConvertConfig
from .pipeline import MarkdownToTexConverter


def main(argv=None):
    parser = argparse.ArgumentParser(description="Markdown (with citations and math) to LaTeX converter")

    # Input/Output
    parser.add_argument("md_path", help="Path to input Markdown file")
    parser.add_argument("--out", "-o", default=None, help="Output .tex path (default: next to the input)")

    # Config overrides (defaults come from MDTEX_* environment variables)
    parser.add_argument("--marker", default=None, help="Pass-through marker for raw LaTeX code (default: mdtotex)")
    parser.add_argument("--unnumbered", action="store_true", help="Emit starred sectioning commands")
    parser.add_argument("--crlf", action="store_true", help="Write CRLF line endings")

    args = parser.parse_args(argv)

    try:
        cfg = ConvertConfig.from_settings(load_settings())
        if args.marker:
            cfg = replace(cfg, passthrough_marker=args.marker)
        if args.unnumbered:
            cfg = replace(cfg, unnumbered_headings=True)
        if args.crlf:
            cfg = replace(cfg, line_ending="\r\n")

        print(f"Converting {args.md_path}...")
        out_file = MarkdownToTexConverter(cfg).convert_file(args.md_path, args.out)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Saved to {out_file}")


if __name__ == "__main__":
    main()
