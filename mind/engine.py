"""
Pure game logic (no terminal, no I/O).
Every guess position gets its own tag:
- GREEN:  the digit sits at the same index in the secret
- YELLOW: the digit appears at some *other* index of the secret
- RED:    the digit does not appear in the secret at all

There is no "use it up" accounting: one secret digit can turn several
guess positions YELLOW at the same time.
"""

from .types import Code, Feedback, FeedbackTag

def score(guess: Code, secret: Code) -> Feedback:
    """
    Example (secret = "2340"):
      guess "0353" -> [YELLOW, GREEN, RED, YELLOW]
        pos 0: '0' is secret[3]       -> YELLOW
        pos 1: '3' == secret[1]       -> GREEN
        pos 2: '5' is nowhere         -> RED
        pos 3: '3' is secret[1]       -> YELLOW (the same '3' again)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    feedback: Feedback = []
    i = 0
    while i < n:
        # 1. Exact match wins over everything else
        if guess[i] == secret[i]:
            feedback.append(FeedbackTag.GREEN)
            i += 1
            continue

        # 2. Look at every other slot of the secret
        tag = FeedbackTag.RED
        j = 0
        while j < n:
            if j != i and guess[i] == secret[j]:
                tag = FeedbackTag.YELLOW
                break
            j += 1
        feedback.append(tag)
        i += 1

    return feedback

def is_win(feedback: Feedback) -> bool:
    """
    Win = every position is GREEN.
    """
    if not feedback:
        return False
    return all(tag is FeedbackTag.GREEN for tag in feedback)
