"""
Module defining game commands for Table Pong.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import Command, CommandContext


class ToggleGameCommand(Command):
    """
    Command to start or stop the game, like the Play/Stop button.
    """

    def execute(self, context: CommandContext):
        world = context.world
        if world is None:
            return

        world.apply(world.driver.toggle())
