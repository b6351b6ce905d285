# %% [markdown]
# # phonics Polars Integration Demo
#
# This demo shows the different levels of API for phonetic matching with Polars.
#
# ## API Hierarchy
#
# | Level | Module | Input | Use Case |
# |-------|--------|-------|----------|
# | Core | `ph.*` | 1-2 strings | Encode or compare words |
# | Batch | `ph.batch.*` | Python lists | List-based encoding |
# | Polars Series | `ph.polars.encode_series` etc. | pl.Series | Column-level ops |
# | Polars DataFrame | `ph.polars.phonetic_join` etc. | pl.DataFrame | Full table ops |
# | Polars Expression | `.phonics.*` | pl.Expr | Expression chains |
#
# ## When to Use What
#
# - **Core (`ph.*`)**: Encode one word, or test two words
# - **Batch (`ph.batch.*`)**: Process Python lists (no Polars needed)
# - **Series**: Encode a whole column in one call
# - **DataFrame**: Join, dedupe or block DataFrames
# - **Expression (`.phonics.*`)**: Use in Polars expression chains (select, filter, with_columns)

# %%
import polars as pl

import phonics as ph
from phonics import polars as php

# %% [markdown]
# ---
# ## Section 1: Expression Namespace (.phonics)

# %%
print("=== Phonetic Encoding ===")
print()

df = pl.DataFrame(
    {
        "name": ["Smith", "Smyth", "Schmidt", "Robert", "Rupert", None],
    }
)

result = df.with_columns(
    soundex=pl.col("name").phonics.soundex(),
    refined=pl.col("name").phonics.refined_soundex(),
    metaphone=pl.col("name").phonics.metaphone(),
)
print("  Phonetic encodings:")
print(result)

# %% [markdown]
# ### .phonics.sounds_like() - Against a literal or another column

# %%
print("\n=== Sounds Like ===")
print()

print("  Names that sound like 'Smithe':")
print(df.filter(pl.col("name").phonics.sounds_like("Smithe")))

pairs = pl.DataFrame(
    {
        "entered": ["Catherine", "Stephen", "Jones"],
        "on_file": ["Kathryn", "Steven", "Johnson"],
    }
)
print(
    pairs.with_columns(
        same=pl.col("entered").phonics.sounds_like(pl.col("on_file"), algorithm="metaphone")
    )
)

# %% [markdown]
# ---
# ## Section 2: Column Operations

# %%
print("\n=== Series Encoding and Blocking ===")
print()

names = pl.Series("name", ["Catherine", "Kathryn", "John", "Jon", "Katherine"])
print(php.encode_series(names, algorithm="metaphone"))

blocked = php.phonetic_blocks(pl.DataFrame({"name": names}), "name", algorithm="metaphone")
print("  Rows grouped into phonetic blocks:")
print(blocked)

# %% [markdown]
# ---
# ## Section 3: DataFrame Operations

# %% [markdown]
# ### phonetic_join() - Join on how names sound

# %%
print("\n=== Phonetic Join ===")
print()

customers = pl.DataFrame({"id": [1, 2, 3], "surname": ["Smith", "Johnson", "Thompson"]})
calls = pl.DataFrame(
    {
        "call_id": ["C1", "C2", "C3", "C4"],
        "heard": ["Smyth", "Jonson", "Tomson", "Brown"],
    }
)

print(php.phonetic_join(calls, customers, left_on="heard", right_on="surname", algorithm="metaphone"))
print(
    php.phonetic_join(
        calls, customers, left_on="heard", right_on="surname", algorithm="metaphone", how="left"
    )
)

# %% [markdown]
# ### dedupe_rows() - Rows that sound alike on every column

# %%
print("\n=== Row Deduplication ===")
print()

people = pl.DataFrame(
    {
        "first": ["Catherine", "Kathryn", "John", "Jon"],
        "last": ["Smith", "Smyth", "Doe", "Dough"],
    }
)
deduped = php.dedupe_rows(people, columns=["first", "last"], algorithm="metaphone")
print(deduped)
print("  Canonical rows only:")
print(deduped.filter(pl.col("_is_canonical")).drop("_group_id", "_is_canonical"))

# %% [markdown]
# ### dedupe_series() - One column

# %%
print(php.dedupe_series(pl.Series(["Smith", "Smyth", "Jones", "Smithe"])))

# %% [markdown]
# ---
# ## Section 4: Reusable Index

# %%
index = ph.PhoneticIndex.from_series(customers["surname"], algorithm="metaphone")
print(index.search_series(calls["heard"]))
