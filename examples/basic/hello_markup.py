"""Parse markup and print it with item prefixes applied."""

from tinta import parse, render

doc = parse("# Groceries\n\n- [x] bread\n- [ ] *fresh* milk\n\n> bring a bag")
print(render(doc))
