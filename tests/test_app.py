from unittest import mock

import pygame
import pytest

from fdf.app import main, run
from fdf.render import Scene


@pytest.mark.parametrize("argv", [[], ["one.fdf", "two.fdf"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == "Error"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 0
    assert capsys.readouterr().out == "Error"


def test_main_ragged_map(tmp_path, capsys):
    path = tmp_path / "ragged.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error"


def test_main_empty_map(tmp_path, capsys):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Error"


def test_run_handles_keys_until_window_closed(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = Scene([[0, 0], [0, 0]], 40, 30)
    start = scene.camera.zoom
    events = [
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_KP_PLUS)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=events):
        run(scene)
    assert scene.camera.zoom == start + 1
    assert any(scene.image.data)


def test_run_stops_on_escape(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = Scene([[0, 0], [0, 0]], 40, 30)
    events = [
        [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
        ],
    ]
    x0 = scene.x_center
    with mock.patch("pygame.event.get", side_effect=events) as get:
        run(scene)
    assert get.call_count == 1
    assert scene.x_center == x0 - 5