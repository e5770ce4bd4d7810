"""Pygame GUI frontend.

One screen: the board, Shuffle and Solve (Hint) buttons, a progress bar
and a status line. Shuffle steps are paced by the frame clock.
"""

from __future__ import annotations

import pygame

from backend.engine.gameplay import GamePlay
from backend.models.board import Direction
from backend.models.config import GameConfig

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_YELLOW = (249, 226, 175)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 460, 640
TILE_PX = 120
TILE_GAP = 6
BOARD_PX = 3 * TILE_PX + 4 * TILE_GAP
BOARD_Y = 64
FPS = 60

_KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(
            surf, self.hover if self._hot else self.bg, self.rect, border_radius=8
        )
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}".strip()
        if line and font.size(candidate)[0] > width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig) -> None:
        self.game = GamePlay(config)
        self._status_msg = "Press Shuffle to start."
        self._status_col = COL_OVERLAY0
        self._since_step_ms = 0

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Eight Puzzle")
        self._clock = pygame.time.Clock()

        self._f_title = pygame.font.SysFont("Helvetica", 24, bold=True)
        self._f_tile = pygame.font.SysFont("Helvetica", 44, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 16, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 14)

        ox = _cx(BOARD_PX)
        btn_y = BOARD_Y + BOARD_PX + 16
        bw, gap = 150, 16
        sx = _cx(2 * bw + gap)
        self._shuffle_btn = _Btn(
            (sx, btn_y, bw, 42), "Shuffle", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._hint_btn = _Btn(
            (sx + bw + gap, btn_y, bw, 42), "Solve (Hint)", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._buttons = [self._shuffle_btn, self._hint_btn]
        self._bar_rect = pygame.Rect(ox, btn_y + 58, BOARD_PX, 22)

    # ── geometry ────────────────────────────────────────────────────────────

    def _tile_rect(self, r: int, c: int) -> pygame.Rect:
        ox = _cx(BOARD_PX) + TILE_GAP
        oy = BOARD_Y + TILE_GAP
        return pygame.Rect(
            ox + c * (TILE_PX + TILE_GAP),
            oy + r * (TILE_PX + TILE_GAP),
            TILE_PX,
            TILE_PX,
        )

    def _cell_at(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        for r in range(3):
            for c in range(3):
                if self._tile_rect(r, c).collidepoint(pos):
                    return r, c
        return None

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        board = self.game.state.board

        _blit_center(
            self._surf, self._f_title.render("EIGHT  PUZZLE", True, COL_TEXT), 20
        )

        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(BOARD_PX), BOARD_Y, BOARD_PX, BOARD_PX),
            border_radius=10,
        )
        for r, row in enumerate(board.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                rect = self._tile_rect(r, c)
                col = COL_GREEN if board.is_tile_correct(r, c) else COL_BLUE
                pygame.draw.rect(self._surf, col, rect, border_radius=8)
                lbl = self._f_tile.render(str(val), True, COL_BASE)
                self._surf.blit(lbl, lbl.get_rect(center=rect.center))

        for btn in self._buttons:
            btn.draw(self._surf)

        self._draw_progress()

        y = self._bar_rect.bottom + 14
        for line in _wrap(self._status_msg, self._f_small, WIN_W - 40):
            _blit_center(self._surf, self._f_small.render(line, True, self._status_col), y)
            y += 20

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click a tile   Arrows / WASD  move   X  shuffle   Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            WIN_H - 28,
        )

    def _draw_progress(self) -> None:
        progress = self.game.progress
        bar = self._bar_rect
        pygame.draw.rect(self._surf, COL_SURFACE0, bar, border_radius=6)
        filled = bar.width * max(0, min(100, progress)) // 100
        if filled:
            pygame.draw.rect(
                self._surf,
                COL_YELLOW,
                pygame.Rect(bar.x, bar.y, filled, bar.height),
                border_radius=6,
            )
        lbl = self._f_small.render(f"Progress: {progress}%", True, COL_BASE)
        self._surf.blit(lbl, lbl.get_rect(center=bar.center))

    # ── actions ─────────────────────────────────────────────────────────────

    def _set_status(self, msg: str, col: tuple = COL_OVERLAY0) -> None:
        self._status_msg = msg
        self._status_col = col

    def _after_move(self) -> None:
        if self.game.is_won:
            self._set_status("★  Puzzle Solved!  ★", COL_GREEN)
        else:
            self._set_status("")

    def _do_shuffle(self) -> None:
        if self.game.config.step_interval_ms == 0:
            self.game.shuffle_now()
            self._set_status("Shuffled!", COL_YELLOW)
            return
        self.game.start_shuffle()
        self._since_step_ms = 0
        self._set_status("Shuffling…", COL_YELLOW)

    def _do_hint(self) -> None:
        self._set_status(self.game.hint(), COL_YELLOW)

    def _advance_shuffle(self, dt_ms: int) -> None:
        """Apply every shuffle step that fell due during the last frame."""
        if not self.game.is_shuffling:
            return
        self._since_step_ms += dt_ms
        interval = self.game.config.step_interval_ms
        while self.game.is_shuffling and self._since_step_ms >= interval:
            if self.game.step_shuffle():
                self._since_step_ms -= interval
        if not self.game.is_shuffling:
            self._set_status("Shuffled!", COL_YELLOW)

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._buttons:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._shuffle_btn.hit(ev.pos):
                self._do_shuffle()
            elif self._hint_btn.hit(ev.pos):
                self._do_hint()
            else:
                cell = self._cell_at(ev.pos)
                if cell is not None and self.game.move_tile(*cell):
                    self._after_move()
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEY_DIRECTIONS:
                if self.game.move(_KEY_DIRECTIONS[ev.key]):
                    self._after_move()
            elif ev.key == pygame.K_x:
                self._do_shuffle()
            elif ev.key == pygame.K_h:
                self._do_hint()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if not self._handle(ev):
                    running = False
                    break

            self._advance_shuffle(self._clock.get_time())
            self._draw()
            pygame.display.flip()
            self._clock.tick(FPS)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(config)
    app.run_loop()
