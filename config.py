"""
Lunar Calendar Clock Configuration

Central configuration file for all constants and settings.
"""
import os

# Canvas Configuration (portrait, all page layout is relative to this size)
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 600

# Frame loop Configuration
CLOCK_FPS = float(os.getenv("CLOCK_FPS", "60"))
FLIP_DURATION_FRAMES = 30
SNAKE_ANGLE_STEP = 0.01  # radians per frame

# Output Configuration
FRAMEBUFFER_DEVICE = os.getenv("FRAMEBUFFER_DEVICE", "/dev/fb0")
FRAMEBUFFER_INFO_DIR = os.getenv("FRAMEBUFFER_INFO_DIR", "/sys/class/graphics/fb0")

# Optional YAML file overriding the calendar style
CLOCK_STYLE_PATH = os.getenv("CLOCK_STYLE_PATH", "")

# Fonts
FONT_DIR = os.getenv("FONT_DIR", "/usr/share/fonts/truetype/dejavu")
SANS_FONT_PATH = os.path.join(FONT_DIR, "DejaVuSans.ttf")
SANS_BOLD_FONT_PATH = os.path.join(FONT_DIR, "DejaVuSans-Bold.ttf")
NUMERAL_FONT_PATH = os.path.join(FONT_DIR, "DejaVuSerif-Bold.ttf")
# Symbola is scalable and covers both the zodiac emoji and Latin text
SYMBOL_FONT_PATH = os.getenv("SYMBOL_FONT_PATH", "/usr/share/fonts/truetype/ancient-scripts/Symbola_hint.ttf")

# Server Configuration
DEFAULT_PORT = 8000
PRODUCTION_PORT = 80
