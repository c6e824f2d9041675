"""The graphical interface of the player, drawn with pygame."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .player import MusicPlayer  # noqa: E402

Rect = tuple[float, float, float, float]

BACKGROUND = (49, 106, 197)
BUTTON_BASE = (180, 215, 250)
BUTTON_HOVER = (200, 235, 255)
WHITE = (255, 255, 255)
YELLOW = (253, 249, 0)
SKYBLUE = (102, 191, 255)
BLUE = (0, 121, 241)
DARKBLUE = (0, 82, 172)
LIGHTGRAY = (200, 200, 200)

BUTTON_SIZE = 80.0
BUTTON_GAP = 34.0
BUTTON_ICONS = ("<<", ">", "[]", ">>")
BAR_SPACING = 8
VISUALIZER_BARS = 24


def format_time(seconds: float) -> str:
    """Format whole seconds as ``MM:SS``."""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


def fraction_at(x: float, left: float, width: float) -> float:
    """Position of ``x`` along a bar, clamped to 0.0..1.0."""
    return min(max((x - left) / width, 0.0), 1.0)


def visualizer_bars(
    x: float, y: float, width: float, height: float, bars: int, anim_time: float
) -> list[Rect]:
    """Rectangles of the animated bars inside the given area."""
    if bars <= 0:
        raise ValueError("bars must be positive")
    bar_width = int((int(width) - (bars + 1) * BAR_SPACING) / bars)
    rects = []
    for i in range(bars):
        phase = anim_time * 1.2 + i * 0.35
        bar_height = (math.sin(phase) + 1.5) / 2.5 * (height - 20) + 28
        rects.append(
            (
                x + BAR_SPACING + i * (bar_width + BAR_SPACING),
                y + height - bar_height - 14,
                float(bar_width),
                bar_height,
            )
        )
    return rects


def button_rects(window_width: float, top: float) -> list[Rect]:
    """The four control buttons (previous, play, stop, next), centred."""
    total = 4 * BUTTON_SIZE + 3 * BUTTON_GAP
    start = (window_width - total) / 2
    return [
        (start + i * (BUTTON_SIZE + BUTTON_GAP), float(top), BUTTON_SIZE, BUTTON_SIZE)
        for i in range(4)
    ]


@dataclass(frozen=True)
class _Layout:
    visualizer: Rect
    info_y: float
    progress_bar: Rect
    buttons: list[Rect]
    volume_bar: Rect

    @classmethod
    def for_window(cls, width: int) -> _Layout:
        vis_w, vis_h = 650.0, 220.0
        vis = (width / 2 - vis_w / 2, 95.0, vis_w, vis_h)
        prog = (120.0, vis[1] + vis_h + 32, width - 240.0, 20.0)
        btn_y = prog[1] + 60
        vol_w, vol_h = 360.0, 18.0
        vol = ((width - vol_w) / 2, btn_y + BUTTON_SIZE + 35, vol_w, vol_h)
        return cls(vis, vis[1] - 68, prog, button_rects(width, btn_y), vol)


def _contains(rect: Rect, point: tuple[int, int]) -> bool:
    x, y, w, h = rect
    return x <= point[0] <= x + w and y <= point[1] <= y + h


def _rounded(surface, color, rect: Rect, roundness: float, width: int = 0) -> None:
    radius = int(min(rect[2], rect[3]) * roundness / 2)
    pygame.draw.rect(surface, color, pygame.Rect(rect), width, border_radius=radius)


class MusicPlayerUI:
    """Window with track info, a visualizer, controls and the song list."""

    def __init__(self, width: int = 1200, height: int = 900) -> None:
        self.width = width
        self.height = height

    def run(self, player: MusicPlayer) -> None:
        """Open the window and run until it is closed."""
        pygame.display.init()
        pygame.font.init()
        try:
            self._loop(player)
        finally:
            pygame.font.quit()
            pygame.display.quit()

    def _loop(self, player: MusicPlayer) -> None:
        screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("XP Player")
        clock = pygame.time.Clock()
        fonts = {size: pygame.font.Font(None, size) for size in (18, 22, 24, 26, 32)}
        layout = _Layout.for_window(self.width)
        volume = 0.7
        anim_time = 0.0

        while True:
            anim_time += clock.tick(60) / 1000.0
            mouse = pygame.mouse.get_pos()
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
                    mouse = event.pos

            current = player.current_song()
            if current is not None and player.duration() > 0:
                duration = player.duration()
                progress = player.progress()
            else:
                duration, progress = 1.0, 0.0

            screen.fill(BACKGROUND)
            self._draw_visualizer(screen, layout.visualizer, anim_time)
            self._draw_info(screen, fonts, layout.info_y, current)
            self._draw_progress(screen, fonts, layout.progress_bar, progress, duration)
            for rect, icon in zip(layout.buttons, BUTTON_ICONS):
                hovered = _contains(rect, mouse)
                _rounded(screen, BUTTON_HOVER if hovered else BUTTON_BASE, rect, 0.5)
                label = fonts[26].render(icon, True, DARKBLUE)
                screen.blit(label, (rect[0] + (rect[2] - label.get_width()) / 2, rect[1] + 17))
            self._draw_volume(screen, fonts, layout.volume_bar, volume)
            self._draw_list(screen, fonts, layout.volume_bar[1] + 68, player, current)

            if clicked:
                volume = self._handle_click(player, layout, mouse, volume)

            pygame.display.flip()

    @staticmethod
    def _handle_click(player, layout: _Layout, mouse, volume: float) -> float:
        prog = layout.progress_bar
        if _contains(prog, mouse):
            player.seek(fraction_at(mouse[0], prog[0], prog[2]))
        actions = (player.previous, player.play, player.stop, player.next)
        for rect, action in zip(layout.buttons, actions):
            if _contains(rect, mouse):
                action()
        vol = layout.volume_bar
        if _contains(vol, mouse):
            volume = fraction_at(mouse[0], vol[0], vol[2])
            player.set_volume(volume)
        return volume

    @staticmethod
    def _draw_visualizer(screen, vis: Rect, anim_time: float) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        _rounded(overlay, (*LIGHTGRAY, int(255 * 0.23)), vis, 0.2)
        for bar in visualizer_bars(*vis, VISUALIZER_BARS, anim_time):
            _rounded(overlay, (*BLUE, int(255 * 0.85)), bar, 0.4)
            _rounded(overlay, SKYBLUE, bar, 0.4, width=3)
        screen.blit(overlay, (0, 0))

    def _draw_info(self, screen, fonts, info_y: float, current) -> None:
        center = self.width / 2
        if current is not None:
            title = fonts[32].render(f"Título: {current.title}", True, WHITE)
            artist = fonts[24].render(f"Artista: {current.artist}", True, SKYBLUE)
            screen.blit(title, (center - title.get_width() / 2, info_y))
            screen.blit(artist, (center - artist.get_width() / 2, info_y + 36))
        else:
            text = fonts[24].render("No hay canciones cargadas.", True, YELLOW)
            screen.blit(text, (center - text.get_width() / 2, info_y + 10))

    @staticmethod
    def _draw_progress(screen, fonts, prog: Rect, progress: float, duration: float) -> None:
        _rounded(screen, DARKBLUE, prog, 0.5)
        filled = min(max(progress, 0.0), 1.0) * prog[2]
        if filled >= 1:
            _rounded(screen, SKYBLUE, (prog[0], prog[1], filled, prog[3]), 0.5)
        start = fonts[18].render(format_time(progress * duration), True, WHITE)
        end = fonts[18].render(format_time(duration), True, WHITE)
        screen.blit(start, (prog[0], prog[1] + 26))
        screen.blit(end, (prog[0] + prog[2] - 55, prog[1] + 26))

    @staticmethod
    def _draw_volume(screen, fonts, vol: Rect, volume: float) -> None:
        screen.blit(fonts[24].render("Volumen", True, WHITE), (vol[0] - 115, vol[1] - 3))
        _rounded(screen, SKYBLUE, vol, 0.5)
        filled = volume * vol[2]
        if filled >= 1:
            _rounded(screen, YELLOW, (vol[0], vol[1], filled, vol[3]), 0.5)
        pygame.draw.circle(screen, YELLOW, (vol[0] + filled, vol[1] + vol[3] / 2), 13)

    @staticmethod
    def _draw_list(screen, fonts, top: float, player, current) -> None:
        for index, song in enumerate(player.playlist()):
            is_current = current is not None and current.path == song.path
            line = f"{index + 1}. {song.title} - {song.artist}"
            text = fonts[22].render(line, True, YELLOW if is_current else WHITE)
            screen.blit(text, (120, top + 30 * index))