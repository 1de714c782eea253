"""Vote (poll) overlay.

An operator opens a poll with ``/vote start <question> <option>...``, may
publish results with ``/vote showresult <kind> <value>...`` and the poll is
drawn when the next operator action arrives (another operator comment or
``/vote stop``). Result values are per-mille; they are displayed as
percentages with one decimal.

Layout:
- 1-3 options: one row of large cards
- 4 and more: a grid chosen by option count (see `layout`)
Each option is a numbered badge, a card, up to three lines of text and,
when results are known, a result pill under the card.
"""

import shlex
from dataclasses import dataclass, field

from nicoass.config.render import RenderConfig
from nicoass.core.exceptions import VoteCommandError
from nicoass.core.logging import get_logger
from nicoass.core.state_machine import VotePhase, create_vote_state_machine
from nicoass.models.comment import CommentRecord
from nicoass.services.converter.office import (
    OFFICE_STYLE,
    TEXT_LAYER,
    band_drawing,
    band_event,
)
from nicoass.services.converter.templates import ASSDialogueParams
from nicoass.services.converter.timing import vpos_to_timestamp

logger = get_logger(__name__)

VOTE_STYLE = "Anketo"
MASK_LAYER = 3
OPTION_LAYER = 5

STOP_COMMAND = "/vote stop"
RESULT_PILL = "m 0 0 s 150 0 150 60 0 60 c"

# Options up to this count use the large single-row layout
COMPACT_MAX_OPTIONS = 3


@dataclass(frozen=True)
class VoteCell:
    """Position and size of one option card (center anchored).

    Attributes:
        x: Card center x
        y: Card center y
        width: Card width
        height: Card height
    """

    x: int
    y: int
    width: int
    height: int


def layout(option_count: int, width: int = 1280, height: int = 720) -> list[VoteCell]:
    """Compute option card positions for a poll.

    Args:
        option_count: Number of options (at least 1)
        width: Canvas width
        height: Canvas height

    Returns:
        Cells in option order. Grids have room for at most nine options;
        further options get no cell.

    Raises:
        ValueError: If option_count is less than 1
    """
    if option_count < 1:
        raise ValueError("A poll needs at least one option")

    def row_presets(card_width: int) -> list[list[int]]:
        return [
            [card_width // 2],
            [width // 3 - 40, (width // 2 - width // 3) + width // 2 + 40],
            [width // 2 - card_width - 40, width // 2, width // 2 + card_width + 40],
        ]

    if option_count <= COMPACT_MAX_OPTIONS:
        card_width = width // 4
        card_height = height // 3
        xs = row_presets(card_width)[option_count - 1]
        return [VoteCell(x, height // 2, card_width, card_height) for x in xs]

    card_width = width // 5
    card_height = height // 4
    columns = row_presets(card_width)
    rows = [
        [height // 2],
        [height // 3, (height // 2 - height // 3) + height // 2],
        [height // 2 - card_height - 20, height // 2 + 20, height // 2 + card_height + 60],
    ]

    if option_count == 4:
        card_width = width // 4
        xs, ys = columns[1], rows[1]
    elif option_count <= 6:
        xs, ys = columns[2], rows[1]
    elif option_count == 8:
        xs = [width * k // 8 for k in (1, 3, 5, 7)]
        ys = rows[1]
    else:
        card_height = height * 9 // 2
        xs, ys = columns[2], rows[2]

    cells = [VoteCell(x, y, card_width, card_height) for y in ys for x in xs]
    return cells[:option_count]


def wrap_option_text(text: str, width: int = 7, max_lines: int = 3) -> list[str]:
    """Hard-wrap option text into fixed-width chunks.

    The last line keeps whatever remains once `max_lines` is reached.

    Args:
        text: Option text
        width: Characters per line
        max_lines: Maximum number of lines

    Returns:
        Lines of text
    """
    lines: list[str] = []
    rest = text
    while len(lines) < max_lines - 1 and len(rest) > width:
        lines.append(rest[:width])
        rest = rest[width:]
    lines.append(rest)
    return lines


@dataclass
class Poll:
    """State of the current poll.

    Attributes:
        question: Question text
        options: Option texts in display order
        question_start: Timestamp the question was opened
        results: Per-mille result values aligned with options
        results_start: Timestamp results were published
    """

    question: str
    options: list[str]
    question_start: str
    results: list[float] = field(default_factory=list)
    results_start: str = ""

    @property
    def has_aligned_results(self) -> bool:
        return bool(self.results) and len(self.results) == len(self.options)


def parse_vote_command(text: str, vpos: int | None = None) -> list[str]:
    """Split a vote command into tokens.

    Tokens follow shell quoting rules; remaining backslashes are removed.

    Args:
        text: Raw comment text
        vpos: Comment timestamp for error context

    Returns:
        Tokens, starting with ``/vote`` and the subcommand

    Raises:
        VoteCommandError: If quoting is unbalanced or the subcommand is missing
    """
    try:
        tokens = [token.replace("\\", "") for token in shlex.split(text)]
    except ValueError as e:
        raise VoteCommandError(f"Cannot parse vote command: {e}", command=text, vpos=vpos) from e
    if len(tokens) < 2:
        raise VoteCommandError("Vote command without subcommand", command=text, vpos=vpos)
    return tokens


class VoteOverlay:
    """Tracks the poll state machine and renders the overlay."""

    def __init__(self, config: RenderConfig) -> None:
        """Initialize with no poll open.

        Args:
            config: Rendering configuration
        """
        self.config = config
        self._state = create_vote_state_machine()
        self.poll: Poll | None = None

    @property
    def is_open(self) -> bool:
        return self._state.current is VotePhase.OPEN

    def handle_command(self, record: CommentRecord) -> list[ASSDialogueParams]:
        """Apply a ``/vote`` operator command.

        Args:
            record: Operator comment starting with ``/vote``

        Returns:
            Overlay events if the command resolved an open poll

        Raises:
            VoteCommandError: If the command is malformed
        """
        vpos = record.vpos or 0
        text = record.content

        if text.startswith(STOP_COMMAND):
            if self.is_open:
                return self.resolve(vpos)
            logger.debug("Vote stop without open poll", vpos=vpos)
            return []

        tokens = parse_vote_command(text, vpos)
        subcommand = tokens[1]
        if subcommand == "start":
            self._start(tokens, text, vpos)
        elif subcommand == "showresult":
            self._record_results(tokens, text, vpos)
        else:
            logger.debug("Ignoring vote subcommand", subcommand=subcommand, vpos=vpos)
        return []

    def _start(self, tokens: list[str], text: str, vpos: int) -> None:
        if len(tokens) < 4:
            raise VoteCommandError(
                "Vote start needs a question and at least one option", command=text, vpos=vpos
            )
        self._state.transition(VotePhase.OPEN)
        self.poll = Poll(
            question=tokens[2],
            options=tokens[3:],
            question_start=vpos_to_timestamp(vpos),
        )
        logger.debug("Poll opened", vpos=vpos, options=len(self.poll.options))

    def _record_results(self, tokens: list[str], text: str, vpos: int) -> None:
        if len(tokens) < 4:
            raise VoteCommandError("Vote result without values", command=text, vpos=vpos)
        try:
            results = [float(value) for value in tokens[3:]]
        except ValueError as e:
            raise VoteCommandError(
                f"Vote result is not a number: {e}", command=text, vpos=vpos
            ) from e

        if not self.is_open or self.poll is None:
            logger.debug("Vote result without open poll", vpos=vpos)
            return
        self.poll.results = results
        self.poll.results_start = vpos_to_timestamp(vpos)

    def resolve(self, vpos: int) -> list[ASSDialogueParams]:
        """Close the open poll and render it.

        Args:
            vpos: Timestamp of the resolving operator action (poll end)

        Returns:
            Overlay events in drawing order
        """
        poll = self.poll
        self._state.transition(VotePhase.CLOSED)
        self.poll = None
        if poll is None:
            return []

        end = vpos_to_timestamp(vpos)
        events = self._question_events(poll, end)
        cells = layout(len(poll.options), self.config.canvas.width, self.config.canvas.height)

        show_results = poll.has_aligned_results
        if poll.results and not show_results:
            logger.warning(
                "Vote results do not match options",
                results=len(poll.results),
                options=len(poll.options),
            )

        compact = len(poll.options) <= COMPACT_MAX_OPTIONS
        for index, cell in enumerate(cells):
            events.extend(self._option_events(poll, index, cell, compact, end))
            if show_results:
                events.extend(self._result_events(poll, index, cell, end))

        logger.debug("Poll rendered", options=len(poll.options), results=show_results)
        return events

    def _question_events(self, poll: Poll, end: str) -> list[ASSDialogueParams]:
        canvas = self.config.canvas
        office = self.config.office
        start = poll.question_start

        size = ""
        if len(poll.question) > office.long_text_threshold:
            size = f"\\fs{office.long_text_font_size}"
        question = poll.question.replace("<br>", "\\N")
        mask = band_drawing(canvas.width + 20, canvas.height + 20)

        return [
            band_event(start, end, self.config),
            ASSDialogueParams(
                layer=TEXT_LAYER,
                start=start,
                end=end,
                style=OFFICE_STYLE,
                text=(
                    f"{{\\an5\\pos({canvas.width // 2},{office.band_height // 2})"
                    f"\\1c&HFF8000&\\bord0\\fsp0{size}}}Q.{{\\1c&HFFFFFF&}}{question}"
                ),
            ),
            ASSDialogueParams(
                layer=MASK_LAYER,
                start=start,
                end=end,
                style=OFFICE_STYLE,
                text=(
                    f"{{\\an5\\p1\\bord0\\1c&H000000&"
                    f"\\pos({canvas.width // 2},{canvas.height // 2})\\1a&HC8&}}{mask}"
                ),
            ),
        ]

    def _option_events(
        self, poll: Poll, index: int, cell: VoteCell, compact: bool, end: str
    ) -> list[ASSDialogueParams]:
        font_size = self.config.canvas.font_size
        option_font_size = font_size // 4 * 3
        if compact:
            badge = font_size * 3 // 2
            badge_offset = font_size * 5 // 8
            number_offset = font_size // 2
            size_tag = ""
        else:
            badge = option_font_size * 5 // 4
            badge_offset = option_font_size * 5 // 8
            number_offset = option_font_size // 3
            size_tag = f"\\fs{option_font_size}"

        left = cell.x - cell.width // 2
        top = cell.y - cell.height // 2
        lines = wrap_option_text(
            poll.options[index], self.config.vote.wrap_width, self.config.vote.max_lines
        )
        text = "".join(f"\\N{line}" for line in lines) if compact else "\\N".join(lines)

        def event(body: str) -> ASSDialogueParams:
            return ASSDialogueParams(
                layer=OPTION_LAYER,
                start=poll.question_start,
                end=end,
                style=VOTE_STYLE,
                text=body,
            )

        return [
            event(
                f"{{\\an5\\p1\\bord0\\1c&HFFFFC8&"
                f"\\pos({left + badge_offset},{top + badge_offset})}}"
                f"m 0 0 l {badge} 0 l {badge} 0 l 0 {badge}"
            ),
            event(
                f"{{{size_tag}\\an5\\bord0\\1c&HD5A07B&"
                f"\\pos({left + number_offset},{top + number_offset})}}{index + 1}"
            ),
            event(
                f"{{\\an5\\p1\\3c&HFFFFC8&\\bord6\\1c&HD5A07B&\\1a&H78&"
                f"\\pos({cell.x},{cell.y})}}{band_drawing(cell.width, cell.height)}"
            ),
            event(f"{{{size_tag}\\an5\\bord0\\1c&HFFFFFF&\\pos({cell.x},{cell.y})}}{text}"),
        ]

    def _result_events(
        self, poll: Poll, index: int, cell: VoteCell, end: str
    ) -> list[ASSDialogueParams]:
        option_font_size = self.config.canvas.font_size // 4 * 3
        y = cell.y + cell.height // 2
        percentage = poll.results[index] / 10
        return [
            ASSDialogueParams(
                layer=OPTION_LAYER,
                start=poll.results_start,
                end=end,
                style=VOTE_STYLE,
                text=f"{{\\an5\\p1\\bord0\\1c&H3E2E2A&\\pos({cell.x},{y})}}{RESULT_PILL}",
            ),
            ASSDialogueParams(
                layer=OPTION_LAYER,
                start=poll.results_start,
                end=end,
                style=VOTE_STYLE,
                text=(
                    f"{{\\fs{option_font_size}\\an5\\bord0\\1c&H76FAF8&"
                    f"\\pos({cell.x},{y})}}{percentage:.1f}%"
                ),
            ),
        ]
