
"""
Rendering helpers for the pygame host.

- Pre-render one block Surface per color and blit it for every cell.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.

The renderer reads Engine snapshots only; it never touches session state.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, TETROMINOS, Piece
from tetris_engine import GameState, Snapshot, Stats

TEXT = (200, 210, 240)
DIM_TEXT = (165, 175, 215)


@dataclass
class HudCache:
    stats: Optional[Stats] = None
    next_key: Optional[tuple] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self._make_static()
        for t in TETROMINOS:
            self._cell(t.color)
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame (4x4 cells)
        self.pv_cell = max(14, int(d.cell*0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (0,0,0), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _cell(self, color: str, size: Optional[int] = None) -> pygame.Surface:
        size = size or self.dims.cell
        key = f"{color}/{size}"
        s = self.cell_surf.get(key)
        if s is None:
            s = pygame.Surface((size-2, size-2))
            s.fill(pygame.Color(color))
            self.cell_surf[key] = s
        return s

    # ---------- Board + falling piece ----------
    def draw_cell(self, screen: pygame.Surface, color: str, bx: int, by: int):
        c = self.dims.cell
        screen.blit(self._cell(color), (self.dims.board_x + bx*c + 1, self.dims.board_y + by*c + 1))

    def draw_board(self, screen: pygame.Surface, board):
        for y, row in enumerate(board):
            for x, color in enumerate(row):
                if color is not None:
                    self.draw_cell(screen, color, x, y)

    def draw_piece(self, screen: pygame.Surface, piece: Piece):
        for x, y in piece.cells():
            if y >= 0:
                self.draw_cell(screen, piece.color, x, y)

    # ---------- HUD / Panel ----------
    def _preview(self, piece: Optional[Piece]) -> pygame.Surface:
        pc = self.pv_cell
        s = pygame.Surface((pc*4, pc*4), pygame.SRCALPHA)
        if piece is None:
            return s
        offx = (4 - len(piece.shape[0])) / 2
        offy = (4 - len(piece.shape)) / 2
        block = self._cell(piece.color, pc)
        for y, row in enumerate(piece.shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(block, (int((x + offx) * pc) + 1, int((y + offy) * pc) + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, stats: Stats, next_piece: Optional[Piece]):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
            self.hud.next_label = f.render("Next:", True, TEXT)
        if stats != self.hud.stats:
            self.hud.stats = stats
            self.hud.score_s = f.render(f"Score: {stats.score}", True, TEXT)
            self.hud.level_s = f.render(f"Level: {stats.level}", True, TEXT)
            self.hud.lines_s = f.render(f"Lines: {stats.lines}", True, TEXT)
        key = (next_piece.name, next_piece.color) if next_piece else None
        if self.hud.preview is None or key != self.hud.next_key:
            self.hud.next_key = key
            self.hud.preview = self._preview(next_piece)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.panel_y + 126))
        screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rotate", True, DIM_TEXT),
                f.render("Space Pause", True, DIM_TEXT),
                f.render("Enter Start • P Resume", True, DIM_TEXT),
                f.render("R Reset • Esc Quit", True, DIM_TEXT),
            ]
        y = d.panel_y + 170 + self.pv_cell*4
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Overlays ----------
    def draw_banner(self, screen: pygame.Surface, text: str, dy: int = 0, color=(255,220,220)):
        d = self.dims
        msg = self.big_font.render(text, True, color)
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2 + dy))
        screen.blit(msg, rect)

    def draw(self, screen: pygame.Surface, snap: Snapshot, final_score: int = 0):
        """Full frame from a snapshot."""
        screen.blit(self.bg, (0,0))
        self.draw_board(screen, snap.board)
        if snap.current is not None and snap.state is not GameState.IDLE:
            self.draw_piece(screen, snap.current)
        self.draw_panel_hud(screen, snap.stats, snap.next)
        if snap.state is GameState.IDLE:
            self.draw_banner(screen, "Press Enter", color=(220,240,255))
        elif snap.state is GameState.PAUSED:
            self.draw_banner(screen, "PAUSED", color=(220,240,255))
        elif snap.state is GameState.OVER:
            self.draw_banner(screen, "GAME OVER", dy=-20)
            self.draw_banner(screen, f"Score {final_score}", dy=20)
