
"""Keyboard mapping: pygame keys -> engine commands / lifecycle actions"""
from typing import Optional
import pygame
from tetris_engine import Command

KEY_COMMANDS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.PAUSE,
}

# The page's buttons: start, pause/resume, reset.
KEY_ACTIONS = {
    pygame.K_RETURN: "start",
    pygame.K_KP_ENTER: "start",
    pygame.K_p: "pause",
    pygame.K_r: "reset",
    pygame.K_ESCAPE: "quit",
}


def command_for(event) -> Optional[Command]:
    if event.type != pygame.KEYDOWN: return None
    return KEY_COMMANDS.get(event.key)


def action_for(event) -> Optional[str]:
    if event.type == pygame.QUIT: return "quit"
    if event.type != pygame.KEYDOWN: return None
    return KEY_ACTIONS.get(event.key)
