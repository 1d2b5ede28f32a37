"""Words that never make it into a generated filename.

Matched against both the lowercased surface form and the lemma of each word.
"""

STOP_WORDS: frozenset[str] = frozenset(
    {
        # articles and basic pronouns
        "the", "a", "an", "i", "we", "you", "they", "he", "she", "it",
        # conjunctions and prepositions
        "and", "but", "or", "in", "on", "of", "with", "by", "for", "to", "from", "as", "at",
        # auxiliary and common verbs
        "is", "are", "were", "was", "be", "have", "has", "had", "do", "does", "did", "can", "will",
        # relative pronouns and demonstratives
        "that", "which", "this",
        # adverbs and adjectives
        "only", "just", "very", "new", "more", "most", "other", "some", "such", "own", "same",
        # time
        "now", "before", "after", "during",
        # quantity and comparison
        "few", "any", "each", "so", "than", "too",
        # filler
        "about", "into", "through", "above", "below",
        # negations
        "no", "nor", "not", "don",
        # file and document words
        "based", "generated", "filename", "file", "document", "text", "output", "category",
        "summary",
        # content description words
        "key", "details", "information", "note", "notes", "main", "ideas", "concepts",
        # description verbs
        "depicts", "show", "shows", "display", "illustrates", "presents", "features",
        "provides", "covers", "includes", "discusses", "demonstrates", "describes",
        # contraction fragments and misc
        "if", "because", "should", "s", "t",
    }
)
