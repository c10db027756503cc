import argparse
import sys

from othello.commentary import GAME_STARTED
from othello.config import CONFIG
from othello.core.board import parse_coords
from othello.difficulty import Difficulty
from othello.game import GameMode
from othello.main import configure_logging, create_engine
from othello.player import AiTurn


def print_status(game, out=print):
    hints = [m.square for m in game.legal_moves()] if game.config.ui.show_hints else []
    out(game.board.render(hints))
    black, white = game.counts()
    black_rate, white_rate = game.win_rate
    out(f"Black {black} | White {white}    win rate {black_rate}% / {white_rate}%")
    out("----------------------------")


def play(game, input_fn=input, out=print, delay_ms=None):
    """Run one game to the end. Returns the GameResult, or None if the user quit."""
    out(GAME_STARTED)
    while not game.is_over:
        print_status(game, out)

        if game.is_ai_turn:
            turn = AiTurn(game, on_thinking=out, delay_ms=delay_ms)
            turn.start()
            turn.wait()
            if turn.decision:
                out(f"AI plays {turn.decision.move.coords}: {turn.decision.rationale}")
            if turn.outcome and turn.outcome.message:
                out(turn.outcome.message)
            continue

        command = input_fn(f"{game.current_player.label} to move (e.g. D3, resign, quit): ").strip()
        if command.lower() == "quit":
            return None
        if command.lower() == "resign":
            game.resign(game.current_player)
            break
        try:
            row, col = parse_coords(command)
        except ValueError as e:
            out(str(e))
            continue
        outcome = game.apply_move(row, col)
        if outcome.message:
            out(outcome.message)

    print_status(game, out)
    out("Game Over")
    out(f"Result: {game.result.describe()}")
    out("Win rate by turn: " + " ".join(f"{s.turn}:{s.black}/{s.white}" for s in game.win_rate_history))
    return game.result


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Othello in the terminal.")
    parser.add_argument("--pvp", action="store_true", help="two humans on one terminal")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty],
                        default=CONFIG.ai.default_difficulty)
    args = parser.parse_args(argv)

    configure_logging()
    mode = GameMode.PVP if args.pvp else GameMode.PVE
    game = create_engine(mode, None if args.pvp else args.difficulty)
    result = play(game, input_fn=input)
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
