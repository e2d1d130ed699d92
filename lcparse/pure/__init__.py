"""Pure lambda calculus: syntax tree, tokenizer, parser and printer."""
