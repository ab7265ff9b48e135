# samples.py - built-in word lists

# loaded at start-up when the tree is empty
INITIAL_WORDS = (
    "react", "javascript", "programming", "computer", "science",
    "algorithm", "data", "structure", "trie", "search",
    "autocomplete", "prefix", "tree", "node", "graph",
)

# loaded on demand ("load samples")
SAMPLE_WORDS = (
    "apple", "application", "apply", "approach", "appropriate",
    "banana", "band", "bank", "bar", "base",
    "cat", "car", "card", "care", "careful",
    "dog", "door", "down", "drive", "drop",
    "elephant", "email", "end", "energy", "engine",
    "friend", "from", "front", "full", "function",
    "great", "green", "group", "grow", "guess",
    "house", "how", "however", "human", "hundred",
    "information", "into", "issue", "item", "important",
    "just", "job", "join", "jump", "june",
)
