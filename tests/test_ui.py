import pytest

tk = pytest.importorskip("tkinter")

from statehist.main import parse_args
from statehist.ui.main_window import MainWindow


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    yield root
    root.destroy()


def test_typing_records_snapshots(root):
    window = MainWindow(root, initial_text="hola")

    window.text_var.set("hola mundo")
    window.text_var.set("hola mundo!")

    assert window.history.history == ["hola", "hola mundo", "hola mundo!"]
    assert window.undo_btn.cget("state") == "normal"
    assert window.redo_btn.cget("state") == "disabled"


def test_undo_restores_entry_without_new_snapshot(root):
    window = MainWindow(root, initial_text="a")
    window.text_var.set("ab")

    window._undo_action()

    assert window.text_var.get() == "a"
    assert window.history.history == ["a", "ab"]
    assert window.redo_btn.cget("state") == "normal"

    window._redo_action()
    assert window.text_var.get() == "ab"


def test_history_panel_selection_jumps(root):
    window = MainWindow(root, initial_text="a")
    window.text_var.set("ab")
    window.text_var.set("abc")

    window.history_panel.listbox.selection_clear(0, "end")
    window.history_panel.listbox.selection_set(0)
    window.history_panel._on_listbox_select()

    assert window.history.current_index == 0
    assert window.text_var.get() == "a"
    assert window.history_panel.listbox.size() == 3


def test_reset_and_clear(root):
    window = MainWindow(root, initial_text="a", max_history=2)
    window.text_var.set("ab")
    window.text_var.set("abc")
    assert window.history.history == ["ab", "abc"]

    window._clear_action()
    assert window.history.history == ["abc"]
    assert window.history_panel.listbox.size() == 1

    window._reset_action()
    assert window.text_var.get() == "a"
    assert "Entradas en historial: 1" in window.status_var.get()


def test_parse_args():
    args = parse_args(["texto", "--max-history", "5", "--no-redo"])

    assert args.text == "texto"
    assert args.max_history == 5
    assert args.enable_redo is False
    assert parse_args([]).text == "Hello World!"


@pytest.mark.parametrize("bad", ["0", "-2"])
def test_parse_args_rejects_invalid_max_history(bad, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--max-history", bad])

    assert excinfo.value.code == 2
    assert "opciones no válidas" in capsys.readouterr().err
