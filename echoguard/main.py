#!/usr/bin/env python3
"""
EchoGuard - spoken obstacle alerts for visually impaired users.

Camera -> YOLO -> one prioritized, rate-limited warning -> TTS
- Ahead first, then left, then right
- Same object/direction repeated at most every 4 seconds
- Gemini (or a completions proxy) phrases the warning, with a template fallback
- Press 'r' or say "read the text" to read signs aloud

Usage:
  python -m echoguard.main
  python -m echoguard.main --url http://192.168.1.100:4747/video  # DroidCam
  python -m echoguard.main --no-phrasing --no-window
"""

import argparse
import logging

from echoguard.camera import open_camera
from echoguard.cloud.gemini_client import GeminiClient
from echoguard.cloud.proxy_client import ProxyCompletionsClient
from echoguard.cloud.tts_client import TTSClient
from echoguard.config import FRAME_HEIGHT, FRAME_WIDTH, load_secrets
from echoguard.detector import Detector
from echoguard.phrasing import Phraser
from echoguard.pipeline import AlertPipeline, FrameLoop
from echoguard.reader import TextReader

logger = logging.getLogger("echoguard")


class SilentVoice:
    """Stand-in for --no-tts: logs instead of speaking."""

    def speak(self, text):
        if text:
            logger.info("[TTS] (muted): %s", text)
        return None


def build_phraser(args, secrets) -> Phraser:
    if args.no_phrasing:
        return Phraser()
    proxy_url = args.proxy_url or secrets.proxy_url
    if proxy_url:
        return Phraser(ProxyCompletionsClient(proxy_url, token=secrets.proxy_token))
    gemini = GeminiClient(secrets.gemini_api_key)
    if gemini.is_available():
        return Phraser(gemini)
    logger.warning("[Phrasing] no GEMINI_API_KEY or proxy configured, using templates only")
    return Phraser()


def main():
    ap = argparse.ArgumentParser(description="EchoGuard - spoken obstacle alerts")
    ap.add_argument("--url", type=str, default=None, help="Camera URL (DroidCam, IP Webcam)")
    ap.add_argument("--camera-index", type=int, default=None, help="Local camera index")
    ap.add_argument("--no-phrasing", action="store_true", help="Template sentences only")
    ap.add_argument("--proxy-url", type=str, default=None, help="Completions proxy endpoint")
    ap.add_argument("--no-tts", action="store_true", help="Log alerts instead of speaking")
    ap.add_argument("--no-window", action="store_true", help="Headless (no OpenCV window)")
    ap.add_argument("--listen", action="store_true", help='Listen for "read the text"')
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    secrets = load_secrets()
    voice = SilentVoice() if args.no_tts else TTSClient()
    alerts = AlertPipeline(build_phraser(args, secrets), voice)

    listener = None
    if args.listen:
        from echoguard.audio_input import CommandListener
        listener = CommandListener()

    loop = FrameLoop(
        cap=open_camera(index=args.camera_index, width=FRAME_WIDTH, height=FRAME_HEIGHT, url=args.url),
        detector=Detector(),
        alerts=alerts,
        reader=TextReader(),
        listener=listener,
        show_window=not args.no_window,
    )
    logger.info("Starting EchoGuard. Press 'q' to quit, 'r' to read text.")
    try:
        loop.run()
    except KeyboardInterrupt:
        loop.stop()
    finally:
        if isinstance(voice, TTSClient):
            voice.close()


if __name__ == "__main__":
    main()
