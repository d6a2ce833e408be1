"""Edit a parsed document in place and watch the change notifications."""

from tinta import TextStorage, parse

storage = TextStorage(parse("Hello **world**"))
unsubscribe = storage.subscribe(print)

storage.insert(len(storage), "!")
storage.set_style(0, 5, italic=True)

for run in storage.runs():
    print(repr(run.text), run.style)

unsubscribe()
