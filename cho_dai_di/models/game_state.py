"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Card, Hand


class HandType(str, Enum):
    """Type of card combination played."""

    INVALID = "invalid"  # Not a legal shape
    SINGLE = "single"
    PAIR = "pair"
    TRIPLET = "triplet"
    STRAIGHT = "straight"
    FLUSH = "flush"
    FULL_HOUSE = "full_house"
    FOUR_OF_A_KIND_PLUS_ONE = "four_of_a_kind_plus_one"
    STRAIGHT_FLUSH = "straight_flush"


# Five-card categories from weakest to strongest
FIVE_CARD_HIERARCHY: tuple[HandType, ...] = (
    HandType.STRAIGHT,
    HandType.FLUSH,
    HandType.FULL_HOUSE,
    HandType.FOUR_OF_A_KIND_PLUS_ONE,
    HandType.STRAIGHT_FLUSH,
)


class RoundState(str, Enum):
    """Where the current round stands."""

    AWAITING_OPENING_PLAY = "awaiting_opening_play"  # No trick to beat
    IN_PROGRESS = "in_progress"  # A trick is on the table
    JUST_WON = "just_won"  # Highest remaining card played; winner leads next


class GameState(BaseModel):
    """Turn and round bookkeeping for one game."""

    # Turn progress (player to act = turn_counter % num_players)
    turn_counter: int = 0
    pass_counter: int = 0  # Consecutive passes since last play or round reset

    # Current trick
    last_play: Hand | None = None
    discard_pile: list[Card] = Field(default_factory=list)  # Append-only history

    # Round lifecycle
    round_state: RoundState = RoundState.AWAITING_OPENING_PLAY
    round_leader: int | None = None  # Player who opened (or will open) the round

    model_config = {"arbitrary_types_allowed": True}

    def reset_for_new_round(self, won_by: int | None = None) -> None:
        """Reset state when the trick is cleared.

        Args:
            won_by: Player who ended the round by playing the highest card,
                and therefore leads the next one. None when everyone passed.
        """
        self.pass_counter = 0
        self.last_play = None
        if won_by is None:
            self.round_state = RoundState.AWAITING_OPENING_PLAY
            self.round_leader = None
        else:
            self.round_state = RoundState.JUST_WON
            self.round_leader = won_by

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_counter}", f"[{self.round_state.value}]"]
        if self.last_play is not None:
            parts.append(f"Last play: {self.last_play}")
        if self.pass_counter:
            parts.append(f"Passes: {self.pass_counter}")
        return " ".join(parts)
