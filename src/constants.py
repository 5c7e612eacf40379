"""All magic values live here — no inline literals anywhere else."""

# Dictation service protocol
ERROR_MARKER = "<title>Error"
HYPOTHESIS_SEPARATOR = "\n"
OUTPUT_ENCODING = "utf-8"

# Session ids: 32 chars over a 64-symbol alphabet. "_" appears twice on purpose;
# servers validate the id against this exact character set.
SESSION_ID_LENGTH = 32
SESSION_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ_0123456789_abcdefghijklmnopqrstuvwxyz"

# Defaults for Config.from_env()
DEFAULT_ENDPOINT = "https://dictation.nuancemobility.net:443/NMDPAsrCmdServlet/dictation"
DEFAULT_LANGUAGE = "eng-USA"
DEFAULT_TOPIC = "Dictation"
DEFAULT_CONTENT_TYPE = "audio/x-wav;codec=pcm;bit=16;rate=16000"
DEFAULT_SCRIPT_PATH = "scripts/dictation.sh"
DEFAULT_HTTP_TIMEOUT = "30"

TRANSPORT_SCRIPT = "script"
TRANSPORT_HTTP = "http"
TRANSPORTS = (TRANSPORT_SCRIPT, TRANSPORT_HTTP)

# HTTP transport
HTTP_ACCEPT = "text/plain"
HTTP_PARAM_APP_ID = "appId"
HTTP_PARAM_APP_KEY = "appKey"
HTTP_PARAM_SESSION_ID = "id"
HTTP_HEADER_LANGUAGE = "Accept-Language"
HTTP_HEADER_TOPIC = "Accept-Topic"

REDACTED = "***"

# Log messages
MSG_STARTING = "Starting dictation session %s"
MSG_INVOKING = "Invoking transport: %s"
MSG_CALLING_SCRIPT = "Calling transport script %s…"
MSG_CALLING_HTTP = "Posting audio to %s"
MSG_SERVICE_ERROR = "Dictation service returned an error page"
MSG_RECOGNIZED = "Recognized %d hypothesis line(s)"
MSG_AUDIO_MISSING = "Audio file not found: %s"
MSG_AUDIO_UNREADABLE = "Audio file not readable: %s"
MSG_DECODE_FAILED = "Transport output is not valid %s"
MSG_HTTP_FAILED = "HTTP transport failed: %s"
MSG_RECOGNIZE_FAILED = "Recognition failed: %s"
MSG_HYPOTHESIS = "%d: %s"
MSG_ERROR_RESPONSE = "Service error: %s"
MSG_USAGE = "Usage: dictation-connect <audio-file>"
