"""Thread safe: parse 1000 docs in parallel, sharing one Markdown instance."""

from concurrent.futures import ThreadPoolExecutor

from linemark import Markdown

docs = ["# Doc " + str(i) + "\n\nContent for\ndocument " + str(i) for i in range(1000)]
md = Markdown(indent_width=2)

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(md.parse, docs))

print(f"Parsed {len(results)} documents in parallel")
print("First doc children:", len(results[0].children))
print("Last doc children:", len(results[-1].children))
