# %% [markdown]
# # fuzzydist: Quickstart
#
# **How far apart are two strings?** - A short tour of the distance methods
#
# ---
#
# ## Table of Contents
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | Edit distances | osa, lv, dl, hamming, lcs and weights |
# | 2 | Q-grams and Jaro | qgram, cosine, jaccard, jw |
# | 3 | Vectors | Recycling, missing values, distance matrices |
# | 4 | Polars | Series, DataFrames and the `.dist` namespace |

# %%
import polars as pl

import fuzzydist as fd

# %% [markdown]
# ## Part 1: Edit distances
#
# `distance(a, b)` is the cost of turning `b` into `a`. The methods differ in
# which edit operations they allow.

# %%
for method in ["osa", "lv", "dl", "hamming", "lcs"]:
    print(f"{method:8s} ca/abc = {fd.distance('ca', 'abc', method=method)}")

# Deletions of characters of `b` are cheaper than insertions here
print(fd.distance("ca", "abc", method="lv", weight=(0.5, 1, 1, 1)))
print(fd.distance("abc", "ca", method="lv", weight=(0.5, 1, 1, 1)))

# A bound turns anything larger into inf
print(fd.distance("kitten", "sitting", method="lv", max_dist=2))

# %% [markdown]
# ## Part 2: Q-grams and Jaro

# %%
print(fd.distance("abc", "cba", method="qgram", q=2))
print(fd.distance("abcd", "abce", method="cosine", q=2))
print(fd.distance("abcd", "abce", method="jaccard", q=2))
print(fd.distance("MARTHA", "MARHTA", method="jw"))
print(fd.distance("MARTHA", "MARHTA", method="jw", p=0.1))

# q larger than a string leaves the distance undefined
print(fd.distance("ab", "abc", method="qgram", q=3))

# %% [markdown]
# ## Part 3: Vectors
#
# The shorter vector is recycled; `None` stays `None`.

# %%
print(fd.stringdist(["kitten", "mitten", None], "sitting", method="lv"))

matrix = fd.stringdistmatrix(
    ["hello", "world"], ["hallo", "word", "help"], method="dl"
)
for row in matrix:
    print(row)

# %% [markdown]
# ## Part 4: Polars

# %%
df = pl.DataFrame({"name": ["MARTHA", "DWAYNE", "DIXON"], "alias": ["MARHTA", "DUANE", None]})
print(
    df.with_columns(
        jw=pl.col("name").dist.stringdist(pl.col("alias"), method="jw", p=0.1),
        close=pl.col("name").dist.within(pl.col("alias"), max_dist=2, method="dl"),
    )
)

print(fd.stringdist_frame(df["name"], pl.Series(["MARTA", "DWAIN"]), method="osa"))
