import io

import pytest

from termtetris.scoring import (
    PLAYER_LIMIT,
    TOP_SCORES,
    Player,
    draw_name_field,
    draw_score,
    load_scores,
    prompt_player_name,
    rank_players,
    save_score,
    show_ranking,
    update_score,
)
from termtetris.screen import Screen


class FakeKeyboard:
    def __init__(self):
        self.calls = []

    def restore(self):
        self.calls.append("restore")

    def enable_raw(self):
        self.calls.append("raw")


def make_screen():
    stream = io.StringIO()
    return Screen(stream), stream


def test_piece_without_lines_scores_base_points():
    assert update_score(0, 0, False) == 25


def test_each_line_adds_the_same_amount():
    one = update_score(0, 1, False)
    two = update_score(0, 2, False)
    none = update_score(0, 0, False)
    assert two - one == one - none == 75


def test_explosive_piece_subtracts_and_clamps():
    assert update_score(100, 3, True) == 50
    assert update_score(30, 0, True) == 0


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "ranking.txt"
    save_score(path, "Ana", 10)
    save_score(path, "Bob", 30)
    assert path.read_text(encoding="utf-8") == "Ana | 10\nBob | 30\n"
    assert load_scores(path) == [Player("Ana", 10), Player("Bob", 30)]


def test_load_scores_respects_limit(tmp_path):
    path = tmp_path / "ranking.txt"
    for number in range(PLAYER_LIMIT + 10):
        save_score(path, f"p{number}", number)
    players = load_scores(path)
    assert len(players) == PLAYER_LIMIT
    assert players[0] == Player("p0", 0)


def test_load_scores_stops_at_malformed_entry(tmp_path):
    path = tmp_path / "ranking.txt"
    path.write_text("Ana | x\nBob | 5\n", encoding="utf-8")
    assert load_scores(path) == []


def test_load_scores_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scores(tmp_path / "absent.txt")


def test_rank_players_orders_descending():
    players = [Player("a", 5), Player("b", 20), Player("c", 10)]
    ranked = rank_players(players)
    assert [p.name for p in ranked] == ["b", "c", "a"]
    assert sorted(ranked, key=lambda p: p.score) == sorted(players, key=lambda p: p.score)


def test_draw_score_shows_value_in_panel():
    screen, stream = make_screen()
    draw_score(screen, 42)
    output = stream.getvalue()
    assert "+---Pontos---+" in output
    assert f"{42:4d}" in output


def test_draw_name_field_shows_name():
    screen, stream = make_screen()
    draw_name_field(screen, "Zed")
    output = stream.getvalue()
    assert "Informe seu nome" in output
    assert output.endswith("Zed")


def test_prompt_player_name_reads_line_mode():
    screen, stream = make_screen()
    keyboard = FakeKeyboard()
    name = prompt_player_name(screen, keyboard, io.StringIO("Maria\nrest\n"))
    assert name == "Maria"
    assert keyboard.calls == ["restore", "raw"]
    assert "Pressione ENTER para continuar" in stream.getvalue()


def test_prompt_player_name_truncates_long_names():
    screen, _ = make_screen()
    long_name = "x" * 40
    name = prompt_player_name(screen, FakeKeyboard(), io.StringIO(long_name + "\n"))
    assert name == long_name[:29]


def test_show_ranking_empty_file(tmp_path):
    path = tmp_path / "ranking.txt"
    path.write_text("", encoding="utf-8")
    screen, stream = make_screen()
    assert show_ranking(screen, path) == []
    assert "Nenhuma pontuacao disponivel" in stream.getvalue()


def test_show_ranking_missing_file(tmp_path):
    screen, stream = make_screen()
    assert show_ranking(screen, tmp_path / "absent.txt") == []
    assert "arquivo nao disponivel." in stream.getvalue()


def test_show_ranking_lists_top_scores(tmp_path):
    path = tmp_path / "ranking.txt"
    for name, score in [("Ana", 10), ("Bob", 30), ("Cid", 5), ("Dan", 7), ("Eve", 12), ("Fay", 1), ("Gus", 20)]:
        save_score(path, name, score)
    screen, stream = make_screen()
    top = show_ranking(screen, path)
    assert len(top) == TOP_SCORES
    assert top[0] == Player("Bob", 30)
    assert all(a.score >= b.score for a, b in zip(top, top[1:]))
    output = stream.getvalue()
    assert "1. ★ Bob - 30 pontos" in output
    assert "Fay" not in output