"""
User-facing log strings.

Centralizing them here keeps the control code free of message formatting.
"""

# Main Runtime
MAIN_STARTING = 'JoyBase starting...'
MAIN_MESSAGE_BUS_CREATED = 'Created the message bus'
MAIN_MESSAGE_BUS_CLOSING = 'Closing the message bus'
MAIN_CONFIGURATION_ERROR = 'Invalid configuration, aborting: {}'
MAIN_ERROR_CONTROLLER_FAILED = "JoyBase can't work without {}"
MAIN_TERMINATED_CTRL_C = 'Terminated due Control+C was pressed'
MAIN_TERMINATED_NORMAL = 'Normal termination'

# Configuration
CONFIG_COPY_DEFAULT = 'Configuration {} not found, copying defaults from {}'
CONFIG_LOADED = 'Loaded configuration from {}'
CONFIG_NOT_FOUND = 'Configuration file not found: {}'
CONFIG_INVALID_JSON = 'Configuration file {} is not valid JSON: {}'
CONFIG_MISSING_VALUE = "Missing required configuration value '{}'"
CONFIG_INVALID_NUMBER = "Configuration value '{}' must be a number, got {!r}"
CONFIG_INVALID_INDEX = "Configuration value '{}' must be an integer index, got {!r}"
CONFIG_INVALID_BUTTON = "Button '{}' must be {} (unassigned) or a non-negative index, got {!r}"
CONFIG_INVALID_MAP = "Axis map '{}' must be an object of axis name to index, got {!r}"
CONFIG_UNKNOWN_AXIS = "Axis map '{}' contains unknown axis '{}', expected one of {}"
CONFIG_SCALE_BOUNDS = 'Maximum scale {} is lower than minimum scale {}'
CONFIG_MIN_SCALE = 'Minimum scale must be positive, got {}'
CONFIG_NEGATIVE_COOLDOWN = 'Scale cooldown must not be negative, got {}'
CONFIG_INITIAL_SCALE_CLAMPED = 'Initial scale {} outside [{}, {}], using {}'

# Teleop Controller
TELEOP_STARTING_CONTROLLER = 'Starting controller...'
TELEOP_TERMINATED = 'Teleop controller terminated, platform stopped.'
TELEOP_QUEUE_ERROR = 'Unknown problem while processing the queue of the teleop controller: {}'
TELEOP_ABORT_RECEIVED = 'Abort received, stopping the platform'
TELEOP_DEADMAN_PRESSED = 'Deadman button pressed, motion enabled'
TELEOP_DEADMAN_RELEASED = 'Deadman button released, stopping'
TELEOP_PUBLISHED = 'Published velocity - Linear (x, y): ({:.5f}, {:.5f}), Angular (z): ({:.5f})'
TELEOP_SCALE_INCREASED = 'Velocity scale increased {:.5f} -> {:.5f}'
TELEOP_SCALE_DECREASED = 'Velocity scale decreased {:.5f} -> {:.5f}'
TELEOP_SCALE_AT_BOUND = 'Velocity scale held at its bound {:.5f}'
TELEOP_ABORT_DROPPED = 'Dropped {} joystick frames queued before the abort'

# Remote Controller
REMOTE_STARTING_CONTROLLER = 'Starting controller...'
REMOTE_TERMINATED = 'Terminated'
REMOTE_QUEUE_ERROR = 'Unknown problem while processing the queue of the remote controller: {}'
REMOTE_IO_ERROR = 'Joystick I/O error, reconnecting: {}'

# Remote Control Service
REMOTE_LOOKING_FOR_DEVICES = 'Looking for connected devices: {}'
REMOTE_ATTEMPTING_OPEN = 'Attempting to open {}...'
REMOTE_OPEN_SUCCESS = '{} opened successfully.'
REMOTE_OPEN_WARNING = 'Could not open {}, retrying in {} seconds: {}'
REMOTE_INIT_MAPPING_ERROR = 'Failed to initialize device mappings: {}'
REMOTE_CONNECTED_TO = 'Connected to device: {}'
REMOTE_LAYOUT_FOUND = '{} axes and {} buttons found'
REMOTE_READ_ERROR = 'Error reading joystick events: {}'
REMOTE_CLOSE_WARNING = 'Error closing device: {}'

# Base Controller
BASE_STARTING_CONTROLLER = 'Starting controller, writing commands to {}'
BASE_TERMINATED = 'Base controller terminated, zero velocity written.'
BASE_QUEUE_ERROR = 'Unknown problem while processing the queue of the base controller: {}'
BASE_WRITE_ERROR = 'Could not write velocity command to {}: {}'

# Logging
LOG_FILE_ENABLED = 'Logging to {} at level {}'
CONFIG_INVALID_LOG_LEVEL = "Log level '{}' is not one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
