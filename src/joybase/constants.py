### Velocity Scale Constants ###
# Multiplicative step applied by the increment / decrement buttons
SCALE_STEP_FACTOR = 1.2
# Lower bound of the velocity scale
DEFAULT_MIN_SCALE = 0.1
# Scale used when the controller starts
DEFAULT_INITIAL_SCALE = 0.5
# Minimum time between two scale adjustments (seconds), operator reaction time
DEFAULT_SCALE_COOLDOWN = 0.5

### Button Assignment ###
# Index meaning "no button assigned", the feature is disabled
UNASSIGNED = -1
DEFAULT_ENABLE_MOVE_BUTTON = 0

# Axis names accepted by each mapping
POSITION_AXES = ('x', 'y')
ORIENTATION_AXES = ('z',)


# Controller Constants
# ===============================
# General Timing and Publishing
# ===============================
# Rate (in Hz) at which the current joystick frame is sent to the teleop process.
PUBLISH_RATE_HZ = 20.0
# Delay between read loop iterations (in seconds)
READ_LOOP_SLEEP = 0.005
# Time the teleop loop waits for a frame before checking the abort topic again (seconds)
FRAME_WAIT_TIMEOUT = 0.1
# ===============================
# Analog Input Filtering
# ===============================
# Deadzone threshold for analog stick drift (0.0-1.0).
DEADZONE = 0.05
# Raw js_event axis range is -32767..32767
AXIS_NORMALIZATION_CONSTANT = 32767.0
# ===============================
# Reconnection and Device Search
# ===============================
# Delay between failed device detection cycles.
DEVICE_SEARCH_INTERVAL = 2.5

# ===============================
# Remote Controller Constants
# ===============================
DEVICE_PATH = '/dev/input'
DEFAULT_DEVICE_NAME = 'js0'
# Size of one js_event record read from the device (in bytes)
JSDEV_READ_SIZE = 8
# Joystick ioctl request codes (linux/joystick.h)
JSIOCGAXES = 0x80016A11
JSIOCGBUTTONS = 0x80016A12
JSIOCGNAME = 0x80006A13

# ===============================
# Message Bus
# ===============================
JOY_QUEUE_SIZE = 10
ABORT_QUEUE_SIZE = 10
# Latest command only, older commands are replaced
CMD_VEL_QUEUE_SIZE = 1

# ===============================
# Configuration
# ===============================
CONFIG_FILE_NAME = 'joybase.json'
DEFAULT_CONFIG_RESOURCE = 'joybase.default.json'

# ===============================
# Abort Handling
# ===============================
# Time the teleop loop keeps discarding queued frames after an abort (seconds)
ABORT_DRAIN_TIMEOUT = 0.05

# ===============================
# Base Controller
# ===============================
# Where velocity commands are written, '-' is standard output
DEFAULT_COMMAND_OUTPUT = '-'

# ===============================
# Logging
# ===============================
DEFAULT_LOGS_FOLDER = 'logs'
DEFAULT_LOG_LEVEL = 'INFO'
LOG_FILE_NAME = 'JoyBase.log'
