# %% [markdown]
# # FuzzySim: Quick Tour
#
# **From typos to edit scripts** - comparing strings the practical way
#
# ---
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | Command picker | Rank commands against what the user typed |
# | 2 | Edit distance | How far apart, and which edits |
# | 3 | Bounded search | Stop early once strings are too far apart |
# | 4 | Other metrics | Jaccard, cosine, Hamming |

# %%
from collections import Counter

import fuzzysim as fs

# %% [markdown]
# ---
# ## Part 1: Command picker
#
# The user typed "geU" into a command palette. Different metrics rank the
# candidates differently.

# %%
commands = ["getUser", "getFirstName", "getUsers", "getAll", "assignUserToGroup", "box", "unbox"]
query = "geU"

for algorithm in (fs.Algorithm.FUZZY, fs.Algorithm.JARO_WINKLER, fs.Algorithm.JACCARD):
    scorer = fs.get_scorer(algorithm)
    best = max(commands, key=lambda c: scorer(query, c))
    print(f"  {algorithm.value:>12}: {best}")

# Edit distance is "lower is better" and prefers short candidates
print(f"  {'levenshtein':>12}: {min(commands, key=lambda c: fs.levenshtein(query, c))}")

# %% [markdown]
# ---
# ## Part 2: Edit distance
#
# `levenshtein_detailed` tells you which edits turn one string into the other.

# %%
for left, right in [("kitten", "sitting"), ("frog", "fog"), ("elephant", "hippo")]:
    result = fs.levenshtein_detailed(left, right)
    print(f"  {left!r} -> {right!r}: {result}")

# %% [markdown]
# ---
# ## Part 3: Bounded search
#
# When you only care whether two strings are within k edits, pass a threshold.
# Only a diagonal band of the cost table is computed, and the answer is -1
# (or `NO_ALIGNMENT`) when the strings are further apart.

# %%
dictionary = ["receive", "recipe", "deceive", "relieve", "reception", "perceive"]
typed = "recieve"

close = [word for word in dictionary if fs.levenshtein(typed, word, threshold=2) >= 0]
print(f"  within 2 edits of {typed!r}: {close}")

result = fs.levenshtein_detailed("aaapppp", "", threshold=6)
print(f"  bounded result: {result} (within bound: {result.is_within_bound})")

# %% [markdown]
# ---
# ## Part 4: Other metrics

# %%
print(f"  jaccard('left', 'right')         = {fs.jaccard_similarity('left', 'right')}")
print(f"  hamming('karolin', 'kerstin')    = {fs.hamming_distance('karolin', 'kerstin')}")
doc_a = Counter("the cat sat on the mat".split())
doc_b = Counter("the dog sat on the log".split())
print(f"  cosine(doc_a, doc_b)             = {fs.cosine_similarity(doc_a, doc_b):.3f}")
