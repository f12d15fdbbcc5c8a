from __future__ import annotations

import logging
from io import StringIO
from typing import Any, Callable, List, Optional, Protocol
from xml.sax.saxutils import escape

from .options import SeriesOptions
from .validators import validate_non_negative_int, validate_type

logger = logging.getLogger(__name__)

InnerWriter = Callable[[StringIO], Any]


class SeriesOwner(Protocol):
    """Anything that keeps an ordered list of its series (a chart)."""

    series: List["Series"]


class SeriesTitle:
    """Name of a series, either plain text or a cell reference with its cached text."""

    def __init__(self, text: str, ref: Optional[str] = None) -> None:
        self.text = validate_type("SeriesTitle.text", (str,), text)
        self.ref = ref if ref is None else validate_type("SeriesTitle.ref", (str,), ref)

    def serialize(self, buffer: StringIO) -> StringIO:
        buffer.write("<c:tx>")
        if self.ref is not None:
            buffer.write(f"<c:strRef><c:f>{escape(self.ref)}</c:f>")
            buffer.write('<c:strCache><c:ptCount val="1"/>')
            buffer.write(f'<c:pt idx="0"><c:v>{escape(self.text)}</c:v></c:pt>')
            buffer.write("</c:strCache></c:strRef>")
        else:
            buffer.write(f"<c:v>{escape(self.text)}</c:v>")
        buffer.write("</c:tx>")
        return buffer


class Series:
    """Base chart series: registration with the owner, title, index and order.

    Subclasses put their own markup inside the ``c:ser`` element by passing an
    inner writer to :meth:`serialize`.
    """

    def __init__(self, chart: SeriesOwner, options: SeriesOptions) -> None:
        self._chart = chart
        self._title: Optional[SeriesTitle] = None
        self._order: Optional[int] = None
        chart.series.append(self)
        if options.title is not None:
            self.title = SeriesTitle(options.title, options.title_ref)
        if options.order is not None:
            self.order = options.order
        logger.debug(f"{type(self).__name__} registered at index {self.index}")

    @property
    def chart(self) -> SeriesOwner:
        return self._chart

    @property
    def index(self) -> int:
        """Position of this series in its chart."""
        return next(i for i, s in enumerate(self._chart.series) if s is self)

    @property
    def order(self) -> int:
        return self._order if self._order is not None else self.index

    @order.setter
    def order(self, value: int) -> None:
        self._order = validate_non_negative_int(f"{type(self).__name__}.order", value)

    @property
    def title(self) -> Optional[SeriesTitle]:
        return self._title

    @title.setter
    def title(self, value: SeriesTitle | str | None) -> None:
        if isinstance(value, str):
            value = SeriesTitle(value)
        if value is not None:
            validate_type(f"{type(self).__name__}.title", (SeriesTitle,), value)
        self._title = value

    def serialize(self, buffer: Optional[StringIO] = None, inner: Optional[InnerWriter] = None) -> StringIO:
        buffer = buffer if buffer is not None else StringIO()
        buffer.write("<c:ser>")
        buffer.write(f'<c:idx val="{self.index}"/>')
        buffer.write(f'<c:order val="{self.order}"/>')
        if self._title is not None:
            self._title.serialize(buffer)
        if inner is not None:
            inner(buffer)
        buffer.write("</c:ser>")
        return buffer

    def to_xml(self) -> str:
        return self.serialize().getvalue()
