"""
Prompts for single-word question answering.
"""


def get_single_word_prompt(question: str) -> str:
    """
    Wrap a user question so the model answers with one word.

    The response is still trimmed to its first token afterwards;
    models do not always obey.
    """
    return (
        "Answer the following question with ONLY a single word "
        "(no explanations, no sentences, just one word): "
        f"{question}"
    )
