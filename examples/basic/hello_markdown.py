"""Parse and render in 3 lines: zero config, zero deps."""

from linemark import parse, render

doc = parse("# Hello **World**\n\n- one\n    - nested\n- two")
html = render(doc)
print(html)
