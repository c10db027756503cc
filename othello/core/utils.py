def format_search_info(depth, score, nodes, elapsed, move, candidates):
    move_str = move.coords if move else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    return (f"info depth {depth} score {score} nodes {nodes} nps {nps} "
            f"time {int(elapsed * 1000)} candidates {candidates} best {move_str}")
