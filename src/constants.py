REDACTED = "<redacted>"

# Defaults for settings read from the environment
DEFAULT_FIREHOSE_USERNAME = "admin"
DEFAULT_FIREHOSE_PASSWORD = "admin"
DEFAULT_LOGGING_BATCH_COUNT = 1000
DEFAULT_LOGGING_BATCH_DURATION = 30  # seconds
DEFAULT_LOGGING_REQUESTS_IN_FLIGHT = 16
DEFAULT_HEARTBEAT_RATE = 30  # seconds
DEFAULT_METRICS_BUFFER_DURATION = 30  # seconds
DEFAULT_METRICS_BATCH_SIZE = 200
DEFAULT_METRIC_PATH_PREFIX = "firehose"
DEFAULT_FOUNDATION_NAME = "cf"
DEFAULT_NOZZLE_IDENTITY = "local-nozzle"
# By default the 'origin' label is prepended to metric names, runtime
# metrics matching this get it as a metric label instead.
DEFAULT_RUNTIME_METRIC_REGEX = r"^(numCPUS|numGoRoutines|memoryStats\..*)$"
DEFAULT_COUNTER_TRACKER_TTL = 130  # seconds

# GCE metadata server
METADATA_HOST_ENV = "GCE_METADATA_HOST"
METADATA_IP = "169.254.169.254"
METADATA_FLAVOR_HEADER = "Metadata-Flavor"
METADATA_FLAVOR = "Google"
METADATA_PATH = "computeMetadata/v1"
# Only the connection is bounded, a server that accepts and never answers
# blocks startup.
METADATA_CONNECT_TIMEOUT = 2
METADATA_PROBE_TIMEOUT = 2
