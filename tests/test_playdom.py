import io

from dominionsim.playdom import main, play_game


def test_play_game_reports_scores():
    out = io.StringIO()
    scores = play_game(3, out)
    text = out.getvalue()
    assert text.startswith("Starting game.\n")
    assert text.endswith(
        f"Finished game.\nPlayer 0: {scores[0]}\nPlayer 1: {scores[1]}\n"
    )


def test_play_game_is_deterministic():
    first, second = io.StringIO(), io.StringIO()
    assert play_game(7, first) == play_game(7, second)
    assert first.getvalue() == second.getvalue()


def test_play_game_both_players_act():
    out = io.StringIO()
    play_game(2, out)
    text = out.getvalue()
    assert "0: end turn\n" in text
    assert "1: endTurn\n" in text
    assert "bought province" in text


def test_main_runs_game(capsys):
    assert main(["4"]) == 0
    assert "Finished game." in capsys.readouterr().out


def test_main_without_seed(capsys):
    assert main([]) == 2
    assert "Usage" in capsys.readouterr().err


def test_main_bad_seed(capsys):
    assert main(["seed"]) == 2
    assert "Usage" in capsys.readouterr().err