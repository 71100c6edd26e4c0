import os
import sys

# pygame без окна
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Модули лежат в корне репозитория
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
