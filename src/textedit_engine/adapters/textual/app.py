"""Executable Textual app that hosts the editing engine."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textedit_engine.adapters.textual.app"
    ) from exc

from textedit_engine.buffer import SessionMirror, spans_on_line
from textedit_engine.runtime import EditorConfig, telemetry
from textedit_engine.session import (
    EditSession,
    JsonFileStore,
    Notification,
    SaveRequest,
    Workspace,
)
from textedit_engine.session.events import FILE_SAVE

from .controller import EditorUIHooks, TextualEditorAdapter

_SEVERITY = {"success": "information", "info": "information", "error": "error"}


def read_document(path: Path) -> str:
    """Decode a text file and normalise line endings to ``\\n``."""

    raw = path.read_bytes()
    text = raw.decode("utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def render_mirror(mirror: Optional[SessionMirror]) -> Text:
    if mirror is None:
        return Text("Welcome. Open text files from the command line.", style="dim")

    out = Text()
    width = len(str(len(mirror.lines)))
    for row, line in enumerate(mirror.lines):
        offset = mirror.content_offsets[row] if row < len(mirror.content_offsets) else 0
        spans = spans_on_line(mirror.matches, row)
        out.append(f"{row + 1:>{width}} ", style="grey42")
        for col, char in enumerate(line):
            styles = []
            if col < offset:
                styles.append("grey50")
            if any(span.contains(row, col) for span in spans):
                styles.append("on purple4")
            if mirror.cursor == (row, col):
                styles.append("reverse")
            out.append(char, style=" ".join(styles) or None)
        if mirror.cursor == (row, len(line)):
            out.append(" ", style="reverse")
        if row < len(mirror.lines) - 1:
            out.append("\n")
    return out


class EditorView(Static, can_focus=True):
    """Buffer view; forwards every key press to the adapter."""

    def on_key(self, event: events.Key) -> None:
        app = self.app
        if not isinstance(app, TextEditApp) or app.adapter is None:
            return
        text = event.character if event.is_printable else None
        result = app.adapter.handle_textual_key(event.key, text=text)
        if result.prevent_default:
            event.prevent_default()
            event.stop()


class TextEditApp(App[None]):
    """Terminal host for the editing engine."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #editor-view {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
        overflow: auto;
    }

    #search-bar {
        height: auto;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+f", "focus_search", "Search", priority=True),
        Binding("ctrl+w", "close_document", "Close", priority=True),
        Binding("ctrl+t", "next_document", "Next file", priority=True),
        Binding("escape", "focus_editor", "Editor", show=False),
    ]

    def __init__(self, session: EditSession, *, save_dir: Path | None = None) -> None:
        super().__init__()
        self.session = session
        self.save_dir = save_dir or Path.cwd()
        self.adapter: TextualEditorAdapter | None = None
        self._view: EditorView | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="search-bar"):
            yield Input(placeholder="Search in file...", id="search")
            yield Input(placeholder="Replace all with... (Enter)", id="replace")
        self._view = EditorView(id="editor-view")
        yield self._view
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        hooks = EditorUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            notify=self._show_notification,
            log=lambda line: telemetry.get_logger("textedit_engine.adapters").debug(
                line
            ),
        )
        self.session.bus.subscribe(FILE_SAVE, self._write_file)
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._view is not None:
            self._view.focus()

    def on_unmount(self) -> None:
        if self.adapter is not None:
            self.adapter.detach()
        self.session.bus.unsubscribe(FILE_SAVE, self._write_file)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search" and self.adapter is not None:
            self.adapter.set_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter is None:
            return
        if event.input.id == "replace":
            self.adapter.replace_all(event.value)
        self.action_focus_editor()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def action_focus_editor(self) -> None:
        if self._view is not None:
            self._view.focus()

    def action_close_document(self) -> None:
        self.session.close_document()
        self._update_view(self.session.mirror())

    def action_next_document(self) -> None:
        count = len(self.session.workspace)
        if count:
            self.session.select_document((self.session.workspace.active_index + 1) % count)
            self._update_view(self.session.mirror())

    def _write_file(self, payload: object) -> None:
        """Write a save request to disk; ``OSError`` is reported by ``EditSession.save``."""

        if not isinstance(payload, SaveRequest):
            return
        target = self.save_dir / Path(payload.filename).name
        target.write_text(payload.content, encoding="utf-8")

    def _update_view(self, mirror: Optional[SessionMirror]) -> None:
        if self._view is not None:
            self._view.update(render_mirror(mirror))
        self.sub_title = mirror.name if mirror else ""

    def _update_status(self, status: str) -> None:
        if self._status is None or self.adapter is None:
            return
        self._status.update(f"{self.adapter.position_label()}  |  {status}")

    def _show_notification(self, notification: Notification) -> None:
        self.notify(notification.message, severity=_SEVERITY[notification.level])


def build_session(config: EditorConfig, paths: Sequence[Path]) -> EditSession:
    workspace = Workspace.restore(
        JsonFileStore(config.state_file), autosave=config.autosave
    )
    session = EditSession(workspace, metadata_separator=config.metadata_separator)
    for path in paths:
        try:
            content = read_document(path)
        except UnicodeDecodeError:
            telemetry.record_event(
                "document.rejected",
                level="warning",
                data={"path": str(path), "reason": "not_text"},
            )
            continue
        session.load_document(path.name, content)
    return session


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Plain-text editor in the terminal")
    parser.add_argument("files", nargs="*", type=Path, help="Text files to open")
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help="Where the open-file list is persisted",
    )
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=None,
        help="Directory that saved files are written to (default: cwd)",
    )
    parser.add_argument(
        "--telemetry-preset",
        choices=("development", "production", "performance"),
        default=None,
    )
    args = parser.parse_args(argv)

    if args.telemetry_preset:
        telemetry.configure(preset=args.telemetry_preset)

    config = EditorConfig.from_env()
    if args.state_file is not None:
        config = EditorConfig(
            state_file=args.state_file,
            metadata_separator=config.metadata_separator,
            autosave=config.autosave,
        )
    session = build_session(config, args.files)
    TextEditApp(session, save_dir=args.save_dir).run()


if __name__ == "__main__":  # pragma: no cover
    main()
