"""Tokenize Markdown in 3 lines — zero config, zero deps."""

from marklet import tokenize

for block in tokenize("# Hello **World**\n\n- [x] tokenized"):
    print(block)
