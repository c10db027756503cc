# othello/commentary.py
from othello.core.evaluator import Evaluator
from othello.core.moves import Move
from othello.core.search import SearchOutcome

# default margin (score points): chosen move beats the worst alternative by more => "clearly best"
CLEAR_BEST_MARGIN = 50

GAME_STARTED = "The game has started."
THINKING = "AI is thinking..."


class CommentaryGenerator:
    def __init__(self, evaluator: Evaluator, clear_best_margin: int = CLEAR_BEST_MARGIN):
        self.evaluator = evaluator
        self.clear_best_margin = clear_best_margin

    def for_random(self, move: Move) -> str:
        return f"Hmm... I just felt like playing {move.coords}."

    def for_greedy(self, move: Move) -> str:
        """Explain a one-ply greedy pick: corners first, otherwise the flip count."""
        if self.evaluator.is_corner(move.row, move.col):
            return f"{move.coords} is a corner, and corners are key to winning."
        return f"Playing {move.coords} flips {len(move.flips)} discs, which looks good."

    def for_search(self, outcome: SearchOutcome) -> str:
        """
        Explain a searched move.
        - corner: it can never be flipped back
        - chosen score beats the worst alternative by more than the margin: clearly best
        - otherwise: taking the initiative
        """
        move = outcome.move
        if self.evaluator.is_corner(move.row, move.col):
            return (f"Key to victory: I took the corner {move.coords}! "
                    f"A disc there can never be flipped.")
        worst = outcome.worst_alternative_score
        if worst is not None and outcome.score > worst + self.clear_best_margin:
            return (f"{move.coords} is the best move right now. "
                    f"Any other move could hurt me in the long run.")
        return f"Playing {move.coords} to seize the initiative felt important."

    @staticmethod
    def for_pass(player) -> str:
        return f"{player.label} has no legal move and passes the turn."
