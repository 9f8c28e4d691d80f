import cv2
import numpy as np
from typing import List

from scoreboard.config import (
    MAX_RENDERED_ROWS,
    OVERLAY_ALPHA,
    OVERLAY_MARGIN,
    OVERLAY_ROW_HEIGHT,
    OVERLAY_WIDTH,
)
from scoreboard.formatting import format_summary
from scoreboard.models import MatchScore


class SummaryRenderer:

    def __init__(self, summary: List[MatchScore]):
        self.summary = list(summary)

        if not self.summary:
            raise ValueError("Summary cannot be empty")

    def render(self, input_path: str, output_path: str):

        cap = cv2.VideoCapture(input_path)

        if not cap.isOpened():
            raise RuntimeError("Cannot open input video")

        fps = cap.get(cv2.CAP_PROP_FPS)
        width = int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

        fourcc = cv2.VideoWriter_fourcc(*"mp4v")
        out = cv2.VideoWriter(output_path, fourcc, fps, (width, height))

        if not out.isOpened():
            cap.release()
            raise RuntimeError("Cannot open output video")

        try:
            while True:
                ret, frame = cap.read()
                if not ret:
                    break

                out.write(self.draw(frame))
        finally:
            cap.release()
            out.release()

    # ----------------------------------------------------
    # DRAWING
    # ----------------------------------------------------

    def draw(self, frame: np.ndarray) -> np.ndarray:
        """Draw the ranked summary in the top-left corner, in place."""

        height, width = frame.shape[:2]
        lines = format_summary(self.summary[:MAX_RENDERED_ROWS])

        box_height = OVERLAY_ROW_HEIGHT * (len(lines) + 1)

        x1 = OVERLAY_MARGIN
        y1 = OVERLAY_MARGIN
        x2 = min(width, x1 + OVERLAY_WIDTH)
        y2 = min(height, y1 + box_height)

        # background box
        overlay = frame.copy()
        cv2.rectangle(overlay, (x1, y1), (x2, y2), (0, 0, 0), -1)
        cv2.addWeighted(overlay, OVERLAY_ALPHA, frame, 1 - OVERLAY_ALPHA, 0, frame)

        font = cv2.FONT_HERSHEY_SIMPLEX
        white = (255, 255, 255)

        cv2.putText(frame, "LIVE", (x1 + 15, y1 + 22), font, 0.6, (0, 255, 0), 2)

        for row, text in enumerate(lines, 1):
            cv2.putText(
                frame,
                text,
                (x1 + 15, y1 + 22 + row * OVERLAY_ROW_HEIGHT),
                font,
                0.5,
                white,
                1,
            )

        return frame
