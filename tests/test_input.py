import pygame

from tetris_engine import Command
from tetris_input import action_for, command_for


def _key(key, kind=pygame.KEYDOWN):
    return pygame.event.Event(kind, key=key)


def test_arrow_keys_map_to_commands():
    assert command_for(_key(pygame.K_LEFT)) is Command.MOVE_LEFT
    assert command_for(_key(pygame.K_RIGHT)) is Command.MOVE_RIGHT
    assert command_for(_key(pygame.K_DOWN)) is Command.SOFT_DROP
    assert command_for(_key(pygame.K_UP)) is Command.ROTATE
    assert command_for(_key(pygame.K_SPACE)) is Command.PAUSE


def test_unmapped_and_keyup_events_are_ignored():
    assert command_for(_key(pygame.K_a)) is None
    assert command_for(_key(pygame.K_LEFT, pygame.KEYUP)) is None
    assert action_for(_key(pygame.K_a)) is None


def test_lifecycle_keys():
    assert action_for(_key(pygame.K_RETURN)) == "start"
    assert action_for(_key(pygame.K_p)) == "pause"
    assert action_for(_key(pygame.K_r)) == "reset"
    assert action_for(pygame.event.Event(pygame.QUIT)) == "quit"
