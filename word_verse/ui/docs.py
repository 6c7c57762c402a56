"""Documentation tab content."""

import streamlit as st

import config


def render_methodology_tab() -> None:
    """Render the 'How it works' explanation tab."""
    st.markdown(f"""
## How Word-Verse Works

### Embeddings in 2D

Each model is a CSV of precomputed coordinates: every row places one word
in a two-dimensional projection of a higher-dimensional embedding space.
Words with related meanings tend to land close together.

```
x, y, word
0.12, -0.40, apple
0.15, -0.38, pear
```

Rows whose coordinates are not numbers, or whose word is empty or a lone
period, are skipped and counted in the load report. You can load several
models and switch between them; the words you are visualizing carry over
whenever the new model knows them.

### Parts of Speech

Every word you add is looked up in an online dictionary. The first meaning's
part of speech decides the color:

| Part of speech | Color |
|---|---|
| Noun | blue |
| Verb | red |
| Adjective | yellow |
| Adverb | green |
| Anything else, or no entry | gray |

A word is looked up at most once per session, whichever model is active.
If the dictionary is unreachable the word is still shown, as unknown.

### Paragraph Analysis

A pasted paragraph is lower-cased and split on punctuation and whitespace.
Tokens containing digits are dropped, duplicates removed, and only words in
the active model are kept. They are then looked up in batches of
{config.CLASSIFY_BATCH_SIZE}, with a short pause between batches so the
dictionary service is not flooded.

Each paragraph remembers the words it added. Click a paragraph to show only
its words; remove it to take those words off the plot.

Note that a word already on the plot is not added again, so it belongs to
the paragraph that first added it.
""")
