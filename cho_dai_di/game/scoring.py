"""End-of-game scoring."""

MAX_HAND_SIZE = 13


def hand_size_to_score(hand_size: int) -> int:
    """Score for the cards left in a hand at game end.

    - 10 or fewer cards: -1 point per card
    - 11-12 cards: -2 points per card
    - 13 cards: -3 points per card

    Raises:
        ValueError: If the size is outside 0-13.
    """
    if not 0 <= hand_size <= MAX_HAND_SIZE:
        raise ValueError(
            f"valid hand sizes for a four-player game are between 0 and "
            f"{MAX_HAND_SIZE} inclusive, got {hand_size}"
        )

    if hand_size <= 10:
        penalty = hand_size
    elif hand_size <= 12:
        penalty = hand_size * 2
    else:
        penalty = hand_size * 3

    return -penalty


def final_scores(hand_sizes: list[int]) -> list[int]:
    """Scores for every seat.

    The player with an empty hand collects the sum of every other player's
    penalty, e.g. sizes [0, 7, 13, 2] score [48, -7, -39, -2].
    """
    scores = [hand_size_to_score(size) for size in hand_sizes]
    reward = abs(sum(scores))
    return [reward if size == 0 else score for size, score in zip(hand_sizes, scores)]


def winner_index(hand_sizes: list[int]) -> int | None:
    """Seat of the player who emptied their hand, or None if nobody has."""
    for i, size in enumerate(hand_sizes):
        if size == 0:
            return i
    return None
