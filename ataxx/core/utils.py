def print_info(depth, score, nodes, elapsed, best_move, WINNING_VALUE):
        nps = int(nodes / elapsed) if elapsed > 0 else 0

        if abs(score) >= WINNING_VALUE:
            score_str = "win red" if score > 0 else "win blue"
        else:
            score_str = f"diff {score}"

        print(f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {best_move}")
