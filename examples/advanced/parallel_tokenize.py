"""Thread safe — tokenize 1000 docs in parallel, each with its own config."""

from concurrent.futures import ThreadPoolExecutor
from functools import partial

from marklet import ParseConfig, tokenize

docs = [f"# Doc {i}\n\n| col | value |\n|-----|-------|\n| id  | {i}   |" for i in range(1000)]

plain = partial(tokenize, config=ParseConfig(tables_enabled=False))

with ThreadPoolExecutor(max_workers=8) as ex:
    tables = list(ex.map(tokenize, docs))
    paragraphs = list(ex.map(plain, docs))

print(f"Tokenized {len(tables) + len(paragraphs)} documents in parallel")
print("Blocks with tables:", len(tables[0]))
print("Blocks without tables:", len(paragraphs[0]))
