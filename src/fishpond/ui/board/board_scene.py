"""BoardScene — QGraphicsScene that draws a BoardLayout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from fishpond.core.coordinates import (
    AXIS_SIZE,
    Margins,
    SquareLabel,
    axis_index_to_file_label,
    axis_index_to_rank_label,
    axis_positions,
)
from fishpond.layout import BoardLayout, build_board_layout, square_layouts
from fishpond.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from fishpond.game.interfaces import IRulesEngine
    from fishpond.ui.settings import BoardSettings


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights, the check marker and pieces.

    Every item is placed from the percentage margins of its layout entry,
    so overlays and pieces always line up with the squares beneath them.
    The scene is display-only: no dragging, clicking or animation.
    """

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._engine: IRulesEngine | None = None
        self._layout: BoardLayout | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_last_move = True
        self._show_check = True

        # Visual layers
        self._square_items: dict[SquareLabel, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[SquareLabel, QGraphicsSimpleTextItem] = {}

        self.setSceneRect(0, 0, AXIS_SIZE * self.TILE, AXIS_SIZE * self.TILE)
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    def set_engine(self, engine: IRulesEngine | None) -> None:
        """Show the game held by *engine* (or an empty board for None)."""
        self._engine = engine
        self.refresh()

    def refresh(self) -> None:
        """Re-read the engine and redraw every layer.

        Call after each move; nothing from the previous position is reused.
        """
        if self._engine is not None:
            self._layout = build_board_layout(self._engine, flipped=self._flipped)
        else:
            self._layout = None
        self._draw_board()
        self._sync_overlays()

    @property
    def board_layout(self) -> BoardLayout | None:
        return self._layout

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_overlays()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_last_move(self, visible: bool) -> None:
        self._show_last_move = visible
        self._sync_overlays()

    def set_show_check(self, visible: bool) -> None:
        self._show_check = visible
        self._sync_overlays()

    def apply_settings(self, settings: BoardSettings) -> None:
        """Apply every viewer setting, then redraw once."""
        self._theme = BoardTheme.by_name(settings.board_theme)
        self._flipped = settings.flipped
        self._show_coordinates = settings.show_coordinates
        self._show_last_move = settings.show_last_move
        self._show_check = settings.show_check
        self.refresh()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))
        if self._layout is not None:
            squares = self._layout.squares
        else:
            squares = square_layouts(self._flipped)
        # Bottom visual row: rank 1 normally, rank 8 when flipped.
        bottom_rank = axis_positions(reverse=self._flipped)[0]

        for square in squares:
            x, y = self._to_scene(square.margins)
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(self._theme.square_fill(square.color)))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[square.label] = rect

            text_color = self._theme.coord_fill(square.color)

            # Rank numbers (left edge)
            if square.position.file == 0:
                txt = self._make_text(
                    axis_index_to_rank_label(square.position.rank), font, text_color
                )
                txt.setPos(x + 2, y + 1)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if square.position.rank == bottom_rank:
                txt = self._make_text(
                    axis_index_to_file_label(square.position.file), font, text_color
                )
                txt.setPos(x + t - 12, y + t - 16)
                self._coord_items.append(txt)

    def _make_text(
        self, text: str, font: QFont, color: QColor
    ) -> QGraphicsSimpleTextItem:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        return txt

    # ── Overlays & pieces ────────────────────────────────────────────────

    def _sync_overlays(self) -> None:
        """Re-create highlight, check and piece items from the layout."""
        self._clear_items(self._last_move_items)
        self._clear_items(self._check_items)
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        layout = self._layout
        if layout is None:
            return

        if self._show_last_move:
            for hl in layout.highlights:
                rect = self._make_highlight(
                    hl.margins, self._theme.last_move_fill(hl.color)
                )
                rect.setZValue(0.5)
                self._last_move_items.append(rect)

        if self._show_check and layout.check is not None:
            rect = self._make_highlight(
                layout.check.margins, self._theme.check_fill(layout.check.is_mate)
            )
            rect.setZValue(0.6)
            self._check_items.append(rect)

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for entry in layout.pieces:
            item = QGraphicsSimpleTextItem(entry.piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(QColor(20, 20, 20)))
            x, y = self._to_scene(entry.margins)
            bounds = item.boundingRect()
            item.setPos(
                x + (t - bounds.width()) / 2,
                y + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[entry.label] = item

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _to_scene(self, margins: Margins) -> tuple[float, float]:
        """Percent margins → scene pixels (top-left corner of the square)."""
        edge = AXIS_SIZE * self.TILE
        return margins.left * edge / 100, margins.top * edge / 100

    def _make_highlight(self, margins: Margins, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle at *margins*."""
        t = self.TILE
        x, y = self._to_scene(margins)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(rect)
        return rect
