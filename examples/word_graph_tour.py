"""
Tour of the word graph queries on a small corpus.
Bridge words, rewriting, shortest paths, PageRank and a random walk.
"""

from wordgraph import WordGraph, generate_sentence_corpus

text = (
    "To explore strange new worlds, to seek out new life and new civilizations. "
    "The scientist studies the dataset and the scientist analyzes the dataset."
)

with WordGraph(seed=7, walk_delay=0.1) as wg:
    wg.load(text)
    print(wg)
    print(wg.describe())

    # 1. Bridge words: words c with edges word1 -> c -> word2
    print("\n" + wg.bridge_words("to", "strange").message())
    print(wg.bridge_words("seek", "life").message())
    print(wg.bridge_words("ghost", "life").message())

    # 2. Rewrite new text, splicing bridges between adjacent words
    print("\nRewritten:", wg.generate_new_text("Seek to explore new and exciting synergies"))

    # 3. Shortest path by summed edge weight
    res = wg.shortest_path("to", "life")
    print("\nPath:", res.message(), f"(weight {res.weight})")

    # 4. PageRank, top five words
    print("\nTop words by PageRank:")
    print(wg.rank_nodes(n=5).to_pandas())

    # 5. Random walk on a background thread; stop() would cut it short
    handle = wg.start_walk()
    print("\nWalk:", " ".join(handle.result()))

# Token frames work too; pos gives the stream order.
corpus = generate_sentence_corpus(n_sentences=30, seed=0)
with WordGraph() as wg:
    wg.load(corpus, pos_col="pos")
    print("\nSynthetic corpus:", wg, "most central:", wg.rank_nodes(n=1).column("node")[0].as_py())
