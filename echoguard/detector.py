"""YOLOv8 object detection adapter."""

import logging
from dataclasses import dataclass
from typing import List, Mapping, Tuple

import numpy as np

from echoguard.config import CLASS_ALIASES, CONFIDENCE_THRESHOLD, YOLO_MODEL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Detection:
    """One object reported for a single frame. bbox is (x, y, w, h) in frame pixels."""

    cls_name: str
    bbox: Tuple[float, float, float, float]

    @property
    def x(self) -> float:
        return self.bbox[0]

    @property
    def width(self) -> float:
        return self.bbox[2]

    @classmethod
    def from_dict(cls, d: Mapping) -> "Detection":
        """Build from the {"class": ..., "bbox": [x, y, w, h]} detector shape."""
        x, y, w, h = d["bbox"]
        return cls(cls_name=d["class"], bbox=(float(x), float(y), float(w), float(h)))


class Detector:
    """Ultralytics YOLO wrapper returning Detection objects in model output order."""

    def __init__(
        self,
        model_path: str = YOLO_MODEL,
        conf: float = CONFIDENCE_THRESHOLD,
        aliases: Mapping[str, str] = CLASS_ALIASES,
    ):
        from ultralytics import YOLO
        self.model = YOLO(model_path)
        self.conf = conf
        self.aliases = dict(aliases)
        logger.info("[Detector] loaded %s (conf=%.2f)", model_path, conf)

    def detect(self, frame: np.ndarray) -> List[Detection]:
        results = self.model.predict(frame, conf=self.conf, verbose=False)

        dets = []
        for r in results:
            if r.boxes is None:
                continue
            boxes = r.boxes
            for i in range(len(boxes)):
                x1, y1, x2, y2 = (float(v) for v in boxes.xyxy[i].cpu().numpy())
                cls = int(boxes.cls[i].cpu().numpy())
                name = self.model.names.get(cls, "object")
                dets.append(Detection(
                    cls_name=self.aliases.get(name, name),
                    bbox=(x1, y1, x2 - x1, y2 - y1),
                ))
        return dets
