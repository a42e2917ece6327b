"""
snapshot.py: Immutable render requests built from the simulation after each tick.

The renderer only ever sees these objects; it never touches live entities.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import (
    TEXT_SIZES, FONT_COLORS, BACKGROUND_COLORS, TRACK_HEIGHT, TRACK_LIFT,
)
from .data_models import GameMode, Player, Obstacle, ObstacleKind
from .geometry import Box
from .layout import Button


@dataclass(frozen=True)
class Sprite:
    image: str
    box: Box


@dataclass(frozen=True)
class TextLine:
    """A line of text centered horizontally at `y`."""
    text: str
    y: float
    size: float
    color: int


@dataclass(frozen=True)
class Palette:
    background: int
    font: int
    highlight: int

    @classmethod
    def for_mode(cls, dark_mode: bool) -> "Palette":
        key = "dark" if dark_mode else "light"
        return cls(BACKGROUND_COLORS[key], FONT_COLORS[key], FONT_COLORS["highlight"])


@dataclass(frozen=True)
class GameSnapshot:
    mode: GameMode
    palette: Palette
    score: float
    high_score: float
    ground_tiles: Tuple[Sprite, ...]
    player: Sprite
    obstacles: Tuple[Sprite, ...]
    clouds: Tuple[Sprite, ...]
    hud: Tuple[TextLine, ...]
    overlay: Optional[str]
    overlay_text: Tuple[TextLine, ...]
    buttons: Tuple[Button, ...]
    hitboxes: Tuple[Box, ...] = ()


@dataclass(frozen=True)
class SettingsSnapshot:
    palette: Palette
    lines: Tuple[TextLine, ...]


def player_image(player: Player, animate: bool = True) -> str:
    if animate and not (player.airborne or player.ducking or player.dead):
        return f"DinoRun{player.frame + 1}"
    if player.dead:
        return "DinoDead"
    if player.airborne:
        return "DinoJump"
    if player.ducking:
        return f"DinoDuck{player.frame + 1}"
    return "DinoStart"


def obstacle_sprite(obstacle: Obstacle, flyer_frame: int, scaled) -> Sprite:
    if obstacle.kind is ObstacleKind.FLYING:
        # The wings-down frame sits a little lower
        y = obstacle.y + (scaled(10) if flyer_frame else 0)
        image = f"{obstacle.variant.sprite}{flyer_frame + 1}"
    else:
        y = obstacle.y
        image = obstacle.variant.sprite
    return Sprite(image, Box(obstacle.x, y, obstacle.width, obstacle.height))


def ground_tiles(offset: float, screen_width: float, tile_width: float,
                 ground_y: float, scaled) -> Tuple[Sprite, ...]:
    tiles = []
    x = -offset
    while x < screen_width:
        tiles.append(Sprite("Track", Box(x, ground_y - scaled(TRACK_LIFT), tile_width, scaled(TRACK_HEIGHT))))
        x += tile_width
    return tuple(tiles)


def build_game_snapshot(session) -> GameSnapshot:
    """Captures everything needed to draw one frame of the game page."""
    world = session.world
    settings = session.settings
    palette = Palette.for_mode(settings.dark_mode)
    text = session.text.get_text
    mod = settings.text_size
    mid = world.screen_height / 2
    score, high = session.score, session.high_score
    mode = session.mode

    def line(value, offset, size_key, color=None):
        return TextLine(value, mid + offset, TEXT_SIZES[size_key] * mod, palette.font if color is None else color)

    # 1. Player: the menu shows an idle dino above the title
    if mode is GameMode.MENU:
        player = Sprite(
            player_image(session.player, animate=False),
            Box(world.screen_width / 2 - world.scaled(20), mid - world.scaled(100),
                session.player.width, session.player.height),
        )
    else:
        player = Sprite(player_image(session.player), session.physics.visual_box(session.player))

    # 2. HUD
    hud = []
    if mode is not GameMode.MENU:
        hud.append(TextLine(f"{int(score):05d}", 30, TEXT_SIZES["score"] * mod, palette.font))
        if high > 0:
            hud.append(TextLine(f"HI {int(high):05d}", 50, TEXT_SIZES["high_score"] * mod, palette.font))

    # 3. Overlay
    overlay_text = []
    overlay = None
    if mode is GameMode.MENU:
        overlay = "menu"
        overlay_text.append(line(text("title"), -40, "title"))
        if high > 0:
            overlay_text.append(line(f"{text('highScoreText')} {int(high)}", 20, "high_score"))
    elif mode is GameMode.PAUSED:
        overlay = "pause"
        overlay_text.append(line(f"{text('scoreText')} {int(score)}", -50, "score"))
        overlay_text.append(line(text("pauseText"), -10, "game_over"))
    elif mode is GameMode.GAME_OVER:
        overlay = "gameOver"
        if session.new_record:
            overlay_text.append(line(text("newHighScoreMsg"), -60, "score", palette.highlight))
        overlay_text.append(line(text("gameOverText"), -20, "game_over"))
        overlay_text.append(line(f"{text('scoreText')} {int(score)}", 10, "score"))

    in_game = mode is not GameMode.MENU
    hitboxes = ()
    if in_game and session.debug_hitboxes:
        hitboxes = (session.physics.player_hitbox(session.player),) + tuple(
            session.physics.obstacle_hitbox(o) for o in session.obstacles)

    return GameSnapshot(
        mode=mode,
        palette=palette,
        score=score,
        high_score=high,
        ground_tiles=ground_tiles(session.ground_offset, world.screen_width, world.track_width,
                                  world.ground_y, world.scaled) if in_game else (),
        player=player,
        obstacles=tuple(obstacle_sprite(o, int(session.flyer_phase) % 2, world.scaled)
                        for o in session.obstacles) if in_game else (),
        clouds=tuple(Sprite("Cloud", Box(c.x, c.y, c.width, c.height))
                     for c in session.clouds) if in_game else (),
        hud=tuple(hud),
        overlay=overlay,
        overlay_text=tuple(overlay_text),
        buttons=session.layout.buttons_for(mode),
        hitboxes=hitboxes,
    )
