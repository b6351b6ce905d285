# %% [markdown]
# # phonics: A Quick Tour
#
# **Spelled differently, sounds the same** - matching names by how they sound
#
# ---
#
# ## The Problem
#
# Names are transcribed by ear. The same person shows up in your records as:
#
# ```
# "Smith"      vs  "Smyth"
# "Catherine"  vs  "Kathryn"
# "Stephen"    vs  "Steven"
# "Knight"     vs  "Night"
# ```
#
# Edit distance does not help much here. A phonetic code does: it maps each
# word to a short key that is the same for words that sound alike.
#
# ---
#
# ## Table of Contents
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | The Encoders | Soundex, Refined Soundex, Metaphone |
# | 2 | Matching | sounds_like and the *_match helpers |
# | 3 | Batches | Lists, missing values, progress, cancellation |
# | 4 | Indexing | Reusable lookups with PhoneticIndex |
# | 5 | Choosing an Algorithm | Trade-offs at a glance |

# %%
import threading

import phonics as ph
from phonics import batch

# %% [markdown]
# ---
# ## Part 1: The Encoders
#
# ### Soundex
#
# A letter followed by three digits. Letters of one sound class share a digit,
# vowels are dropped.

# %%
for name in ["Robert", "Rupert", "Rubin", "Ashcraft", "Tymczak", "Lee"]:
    print(f"  {name:10} -> {ph.soundex(name)}")

# Longer codes are padded with zeros (up to four) or truncated
print(f"  Washington (6) -> {ph.soundex('Washington', max_code_len=6)}")

# %% [markdown]
# ### Refined Soundex
#
# More sound classes, every change of digit is kept, and nothing is padded.
# Good when plain Soundex lumps too much together.

# %%
for name in ["Robert", "Rupert", "Braz", "Caren"]:
    print(f"  {name:10} -> {ph.refined_soundex(name)}")

# %% [markdown]
# ### Metaphone
#
# Rules based on English pronunciation: silent letters, "PH" as "F", "TH" as
# "0" (theta), and so on.

# %%
for name in ["Thompson", "Knight", "Night", "Phone", "Catherine", "Kathryn"]:
    print(f"  {name:10} -> {ph.metaphone(name)}")

# %% [markdown]
# The `traditional` flag picks between the classic and revised CH/SCH rules:

# %%
for word in ["school", "Christ"]:
    print(
        f"  {word:8} traditional={ph.metaphone(word):6} "
        f"revised={ph.metaphone(word, traditional=False)}"
    )

# %% [markdown]
# ---
# ## Part 2: Matching

# %%
pairs = [("Smith", "Smyth"), ("Catherine", "Kathryn"), ("Stephen", "Steven"), ("Smith", "Jones")]

for a, b in pairs:
    print(
        f"  {a:10} ~ {b:10} soundex={ph.soundex_match(a, b)!s:5} "
        f"metaphone={ph.metaphone_match(a, b)}"
    )

# Words without letters carry no sound and never match, not even each other
print(f"\n  '' ~ '' -> {ph.sounds_like('', '')}")

# %% [markdown]
# ---
# ## Part 3: Batches
#
# `phonics.batch` encodes whole lists. Missing values pass through as `None`.

# %%
names = ["Robert", None, "Rupert", "42", "Smith"]
print(batch.soundex(names))
print(batch.pairwise(["Smith", "Jones", None], ["Smyth", "Johnson", "Brown"]))
print(batch.group_by_code(["Catherine", "Kathryn", "John"], "metaphone"))

# %% [markdown]
# Long batches stop at a checkpoint every `PHONICS_CHECK_INTERVAL` items
# (10000 by default). There a progress callback is called and a cancel
# event is checked.

# %%
ph.set_check_interval(2_000)


def report(done, total):
    print(f"  {done}/{total}")


codes = batch.metaphone(["Catherine"] * 5_000, progress=report)

cancel = threading.Event()
cancel.set()
try:
    batch.metaphone(["Catherine"] * 5_000, cancel_event=cancel)
except ph.EncodingCancelled as exc:
    print(f"  stopped after {exc.processed} items")

ph.set_check_interval(None)

# %% [markdown]
# ---
# ## Part 4: Indexing
#
# For many lookups against the same list, build a `PhoneticIndex` once.

# %%
index = ph.PhoneticIndex(
    ["Smith", "Smyth", "Jones", "Johnson", "Catherine", "Kathryn"],
    algorithm="metaphone",
)
for query in ["Smithe", "Katherine", "Jonson"]:
    print(f"  {query:10} -> {[m.text for m in index.search(query)]}")

# %% [markdown]
# ---
# ## Part 5: Choosing an Algorithm
#
# | Algorithm | Code | Strength |
# |-----------|------|----------|
# | soundex | letter + 3 digits | Standard for surnames, very coarse |
# | refined_soundex | letter + digits | Finer classes, fewer false matches |
# | metaphone | letters | Understands English spelling rules |
