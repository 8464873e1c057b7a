"""Platform constants for the dice bot."""

# Interaction types (inbound)
INTERACTION_PING = 1
INTERACTION_APPLICATION_COMMAND = 2
INTERACTION_MESSAGE_COMPONENT = 3

# Interaction response types (outbound)
RESPONSE_PONG = 1
RESPONSE_CHANNEL_MESSAGE = 4
RESPONSE_DEFERRED_CHANNEL_MESSAGE = 5

# Message component types
COMPONENT_ACTION_ROW = 1
COMPONENT_BUTTON = 2
COMPONENT_TEXT_DISPLAY = 10

BUTTON_STYLE_PRIMARY = 1

# Message flags
FLAG_IS_COMPONENTS_V2 = 1 << 15

# Button ids
D20_BUTTON_ID = "dice_roll_button"
D6_BUTTON_ID = "d6_roll_button"
D4_BUTTON_ID = "d4_roll_button"

# Display
DICE_EMOJI = "🎲"
ROLL_BUTTON_LABEL = "Lanzar"
EMBED_COLOR = 3709656
HELLO_PREFIX = "hello world "
EMOJI_POOL = [
    "😭",
    "😄",
    "😌",
    "🤓",
    "😎",
    "😤",
    "🤖",
    "😶‍🌫️",
    "🌏",
    "📸",
    "💿",
    "👋",
    "🌊",
    "✨",
]

# Outbound endpoints
DISCORD_API_BASE = "https://discord.com/api/v10"
PLACEHOLDER_URL = (
    "https://placehold.co/512x512/{bg}/{fg}.png?text={label}%0A{value}&font={font}"
)
PLACEHOLDER_BG = "111827"
PLACEHOLDER_FG = "38bdf8"
PLACEHOLDER_FONT = "source-sans-pro"

# Signature headers
SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"

# Defaults
DEFAULT_PORT = 3000
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_ASSETS_DIR = "assets"
