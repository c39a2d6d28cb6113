"""Apply a modeline to an in-memory document."""

from modeline import TextDocument, apply_modelines

doc = TextDocument.from_text("// vim: et ts=2 sw=2\nint main(void) { return 0; }\n")
print(apply_modelines(doc))
print(doc.settings())
