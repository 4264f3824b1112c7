"""
Arcade window: draws the field and feeds keyboard/mouse input to the game
"""

from __future__ import annotations

from typing import Optional

import arcade

from .entities import Outcome
from .game import ChaseGame
from .input import InputState

# Arcade key codes -> host key identifiers understood by InputState
ARCADE_KEYS = {
    arcade.key.UP: "ArrowUp",
    arcade.key.DOWN: "ArrowDown",
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.RIGHT: "ArrowRight",
}


class ChaseWindow(arcade.Window):
    """Arcade window for playing or watching the chase"""

    def __init__(self, game: ChaseGame, interactive: bool = True,
                 inputs: Optional[InputState] = None):
        size = int(round(game.field_size))
        super().__init__(size, size, "Creeper Chase")
        self.game = game
        self.interactive = interactive
        self.inputs = inputs if inputs is not None else InputState()

        # Banner shown after a terminal event; ticking pauses until dismissed
        self.message: Optional[str] = None

        # Colors
        self.BG = (0xE8, 0xF5, 0xE9)
        self.BORDER_C = (0x2E, 0x7D, 0x32)
        self.TRUNK_C = (0x8D, 0x6E, 0x63)
        self.LEAVES_C = (0x2E, 0x7D, 0x32)
        self.STONE_C = (0x9E, 0x9E, 0x9E)
        self.GRASS_C = (0xA5, 0xD6, 0xA7)
        self.ROOF_C = (0x5D, 0x40, 0x37)
        self.BANNER_C = (0, 0, 0, 180)
        self.TEXT_C = (255, 255, 255)

        self.background_color = self.BG

    # ----------------------------
    # Coordinates
    # ----------------------------

    def _sy(self, y: float) -> float:
        """Game y (down) -> arcade y (up)"""
        return self.game.field_size - y

    def _square(self, x: float, y: float, size: float, color):
        half = size / 2
        arcade.draw_lrbt_rectangle_filled(
            x - half, x + half, self._sy(y + half), self._sy(y - half), color
        )

    # ----------------------------
    # Update
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive or self.message is not None:
            return

        outcome = self.game.tick(self.inputs)
        if outcome is not Outcome.NONE:
            self.show_message(outcome.message)

    def show_message(self, text: str):
        print(text)
        self.message = text
        # Key releases are lost while the banner is up
        self.inputs.clear()

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if self.message is not None:
            self.message = None
            return
        key = ARCADE_KEYS.get(symbol)
        if key is not None:
            self.inputs.press(key)

    def on_key_release(self, symbol: int, modifiers: int):
        key = ARCADE_KEYS.get(symbol)
        if key is not None:
            self.inputs.release(key)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if self.message is not None:
            self.message = None
            return
        self.inputs.touch_start(x, self._sy(y))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        self.inputs.touch_end(x, self._sy(y))

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        """Draw the current game state"""
        self.clear()

        s = self.game.field_size
        arcade.draw_lrbt_rectangle_outline(2.5, s - 2.5, 2.5, s - 2.5, self.BORDER_C, 5)

        self._draw_decorations()
        self._draw_safe_house()

        for e in (self.game.player, self.game.creeper):
            self._square(e.x, e.y, e.size, e.color)

        if self.message is not None:
            self._draw_banner()

    def _draw_decorations(self):
        for d in self.game.decorations:
            if d.kind == "tree":
                # Trunk below a round crown
                arcade.draw_lrbt_rectangle_filled(
                    d.x - 5, d.x + 5, self._sy(d.y + 25), self._sy(d.y + 10), self.TRUNK_C
                )
                arcade.draw_circle_filled(d.x, self._sy(d.y), 15, self.LEAVES_C)
            elif d.kind == "stone":
                arcade.draw_lrbt_rectangle_filled(
                    d.x, d.x + 15, self._sy(d.y + 15), self._sy(d.y), self.STONE_C
                )
            elif d.kind == "grass":
                arcade.draw_lrbt_rectangle_filled(
                    d.x, d.x + 12, self._sy(d.y + 12), self._sy(d.y), self.GRASS_C
                )

    def _draw_safe_house(self):
        h = self.game.safe_house
        self._square(h.x, h.y, h.size, h.color)

        # Roof
        arcade.draw_triangle_filled(
            h.x - h.half, self._sy(h.y - h.half),
            h.x + h.half, self._sy(h.y - h.half),
            h.x, self._sy(h.y - h.size),
            self.ROOF_C,
        )

    def _draw_banner(self):
        s = self.game.field_size
        arcade.draw_lrbt_rectangle_filled(0, s, s / 2 - 40, s / 2 + 40, self.BANNER_C)
        arcade.draw_text(self.message, s / 2, s / 2 + 8, self.TEXT_C, 14,
                         anchor_x="center", anchor_y="center")
        arcade.draw_text("Press any key to continue", s / 2, s / 2 - 18, self.TEXT_C, 10,
                         anchor_x="center", anchor_y="center")
