"""
TicTacToe UI
A graphical interface for playing TicTacToe against the computer, using Tkinter.

Shows:
- The board (click a cell to play X)
- Game status and score
- Difficulty level selection
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Engine imports
from engine.game_session import GameSession, TurnState
from engine.move_engine import Difficulty
from engine.outcome import winning_line

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


DIFFICULTY_BUTTONS = [
    ("Easy", Difficulty.EASY, "#4ade80"),
    ("Medium", Difficulty.MEDIUM, "#fbbf24"),
    ("Hard", Difficulty.HARD, "#f87171"),
]


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        config: Optional[DisplayConfig] = None,
        verbose: bool = False
    ):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.session = GameSession(difficulty, verbose=verbose)
        self.renderer = BoardRenderer(self.config)

        # Pending opponent reply (Tk after() id)
        self._pending_reply: Optional[str] = None

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config
        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND)
        self.root.geometry(f"{cfg.WINDOW_WIDTH}x{cfg.WINDOW_HEIGHT}")
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND)
        style.configure('TLabel', background=cfg.BACKGROUND, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.board_canvas = tk.Canvas(
            left_frame,
            width=cfg.BOARD_IMAGE_SIZE,
            height=cfg.BOARD_IMAGE_SIZE,
            bg='#0f0f1a',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=280)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Game status section
        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.score_label = ttk.Label(right_frame, text="", style='Score.TLabel')
        self.score_label.pack()

        # Difficulty section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="⚙️ Difficulty", style='Title.TLabel').pack()

        diff_frame = ttk.Frame(right_frame)
        diff_frame.pack(pady=10)

        self.diff_buttons = {}
        for text, difficulty, color in DIFFICULTY_BUTTONS:
            btn = tk.Button(
                diff_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=7,
                activebackground=color,
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=4)
            self.diff_buttons[difficulty] = (btn, color)
        self._update_difficulty_buttons()

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        tk.Button(
            right_frame,
            text="🔄 Restart Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=20,
            command=self._reset_game
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=20,
            command=self._quit
        ).pack(pady=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _update_difficulty_buttons(self):
        for difficulty, (btn, color) in self.diff_buttons.items():
            if difficulty == self.session.difficulty:
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level. The board is reset."""
        self._cancel_reply()
        self.session.set_difficulty(difficulty)
        self._update_difficulty_buttons()
        print(f"Difficulty set to: {difficulty.value}")
        self._refresh()

    def _on_board_click(self, event):
        """Handle a click on the board canvas."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        result = self.session.play_player_move(index)
        if not result.is_valid:
            if self.config.DEBUG_MODE:
                print(f"Move rejected: {result.error_message}")
            return

        self._refresh()

        if self.session.state == TurnState.OPPONENT_TURN:
            self._pending_reply = self.root.after(self.config.OPPONENT_DELAY_MS, self._opponent_move)

    def _opponent_move(self):
        """Let the engine reply."""
        self._pending_reply = None
        index = self.session.play_opponent_move()
        if self.config.DEBUG_MODE and index is not None:
            print(f"Opponent played cell {index}")
        self._refresh()

    def _cancel_reply(self):
        if self._pending_reply is not None:
            self.root.after_cancel(self._pending_reply)
            self._pending_reply = None

    def _refresh(self):
        """Redraw the board and labels from the session."""
        board = self.session.board
        image = self.renderer.render(board, highlight=winning_line(board))

        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self.status_label.configure(text=self.session.status_message)
        scores = self.session.scores
        self.score_label.configure(
            text=f"Wins: {scores.wins}   Losses: {scores.losses}   Draws: {scores.draws}"
        )

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self._cancel_reply()
        self.session.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_reply()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
