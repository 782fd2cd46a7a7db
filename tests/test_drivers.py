import io
import sys

from warzone import drivers
from warzone.engine import Phase
from warzone.orders import Bomb, DeployOrder
from warzone.player import Player


def test_game_states_runs_to_goodbye():
    commands = (
        "loadmap validatemap addplayer assigncountries\n"
        "issueorder endissueorders win end\n"
    )
    out = io.StringIO()
    engine = drivers.test_game_states(io.StringIO(commands), out)
    text = out.getvalue()
    assert engine.phase is Phase.END
    assert "Change State to Map Loaded\n" in text
    assert "Change State to Win\n" in text
    assert text.endswith("Goodbye!\n")


def test_game_states_reports_invalid_command():
    out = io.StringIO()
    engine = drivers.test_game_states(io.StringIO("bogus\nloadmap\n"), out)
    text = out.getvalue()
    assert engine.phase is Phase.MAP_LOADED
    assert "Invalid command, please try again.\n" in text
    assert text.index("Invalid command") < text.index("Change State to Map Loaded")


def test_game_states_stops_at_end_of_input():
    out = io.StringIO()
    engine = drivers.test_game_states(io.StringIO(""), out)
    assert engine.phase is Phase.START
    assert out.getvalue() == "Enter a command: "


def test_players_announces_and_lists_attack():
    out = io.StringIO()
    player = drivers.test_players(Player("Player 1"), io.StringIO("2\n5\n"), out)
    text = out.getvalue()
    assert text.startswith("========== Testing Players ==========\nPlayer 1 created\n")
    for territory in player.to_attack():
        assert f"{territory} \n" in text
    assert "Exiting Player Menu" in text


def test_player_menu_defend_and_invalid():
    out = io.StringIO()
    player = Player("Player 1")
    drivers.player_menu(player, io.StringIO("3 x 5"), out)
    text = out.getvalue()
    assert "Player 1's Territories to Defend: \n" in text
    for territory in player.to_defend():
        assert f"{territory} \n" in text
    assert "Invalid choice\n" in text


def test_player_menu_orders_then_print():
    out = io.StringIO()
    player = Player("Player 1")
    drivers.player_menu(player, io.StringIO("4\n1\n5\n"), out)
    assert len(player.orders) == 1
    assert player.orders[0].matches(DeployOrder(3, "Base", "Frontline"))
    text = out.getvalue()
    assert "Order successfully created and added to list.\n" in text
    assert str(player) in text


def test_order_list_moves_second_bomb_first():
    out = io.StringIO()
    orders, player = drivers.test_order_list(out)
    assert orders[0].matches(Bomb(200, "Kenya", "Nigeria"))
    assert [o.army_units for o in orders] == [200, 50, 100]
    text = out.getvalue()
    after = text[text.index("AFTER REMOVE"):]
    assert after.index("Number of Army Units:200") < after.index("Number of Army Units:50")
    assert len(player.orders) == 4
    assert text.count("Order successfully created and added to list.") == 4


def test_main_invalid_option(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n"))
    assert drivers.main([]) == 0
    assert "Invalid option, try again\n" in capsys.readouterr().out


def test_main_game_engine_ends_program(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n5\nloadmap\n3\n"))
    assert drivers.main([]) == 0
    text = capsys.readouterr().out
    assert "Change State to Map Loaded" in text
    assert "Invalid command, please try again." in text
    assert "AFTER REMOVE" not in text


def test_main_orders_list(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n"))
    assert drivers.main([]) == 0
    text = capsys.readouterr().out
    assert "BEFORE REMOVE" in text
    assert "Name: Umer" in text