#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
md_to_tex.py

Markdown -> LaTeX converter for manuscripts written with author-year citations.

  python md_to_tex.py chapter.md                 # writes chapter.tex
  python md_to_tex.py chapter.md -o build/ch.tex --unnumbered

Inline syntax on top of Markdown:
  @smith2020 [p. 5]                 narrative citation
  [see @smith2020, p. 5; @doe]      parenthetical citation list
  (see para. 3)                     paragraph reference, joined with ~
  $x^2$                             math, passed through
  `mdtotex \\newpage`               raw LaTeX
"""

from mdtex.converter.runner import main

if __name__ == "__main__":
    main()
