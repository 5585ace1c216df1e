"""Flat fragments: collect emphasized words and link targets without a tree walk."""

from linemark import Image, Link, Style, StyledRun, parse

source = """# Reading list

Start with **Structure and Interpretation** then try [SICP online](https://sicp.example).
Skim *anything* marked ~~deprecated~~ and keep `notes.md` close.

![cover](cover.png)
"""

doc = parse(source)

for block in doc.children:
    for fragment in getattr(block, "content", ()):
        match fragment:
            case StyledRun(style=style, text=text) if Style.MODIFIER not in style and style:
                print(f"{style!r:40} {text!r}")
            case Link(alt=alt, target=target):
                print(f"{'link':40} {alt!r} -> {target}")
            case Image(alt=alt, source=src):
                print(f"{'image':40} {alt!r} -> {src}")
