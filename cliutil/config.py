# cliutil/config.py
# Default option values (tweak as needed)

MAX_OUTPUT_WIDTH = 80

# Message types / verbosity / logging flags
MESSAGE_ERROR = "e"
MESSAGE_STATUS = "s"
MESSAGE_INFORMATION = "i"
FLAG_PROGRESS = "p"
FLAG_OVERWRITE_LOG = "o"
FLAG_NONE = "-"

VERBOSITY_DEFAULT = MESSAGE_STATUS + MESSAGE_ERROR + FLAG_PROGRESS
LOGGING_DEFAULT = MESSAGE_STATUS + MESSAGE_ERROR + MESSAGE_INFORMATION + FLAG_OVERWRITE_LOG

# Progress. Console format may also use %item%, %total%, %time_passed%, %speed_avg%, %speed_cur%, %title%
PROGRESS_CONSOLE_FORMAT = "%percent% done [%bar%] left: %eta% %rotator%"
PROGRESS_FILE_FORMAT = (
    "%title%\n\n%item%/%total% [%bar%] %percent%\n\n"
    "Speed (cur):  %speed_cur%\nSpeed (avg):  %speed_avg%\n"
    "Time elapsed:\t%time_passed%\nTime left:    ~ %eta%"
)
PROGRESS_PERCENT_PRECISION = 1
PROGRESS_SPEED_PRECISION = 2
PROGRESS_TIME_PRECISION = 0
PROGRESS_CONSOLE_REFRESH_INTERVAL = 0.5  # seconds
PROGRESS_FILE_REFRESH_INTERVAL = 5.0     # seconds
PROGRESS_ROTATOR_SEQUENCE = ("|", "/", "-", "\\")

# Status messages (%time_current% -> current time, %time_passed% -> passed time)
STATUS_START_MESSAGE = "Started at %time_current%"
STATUS_END_MESSAGE = "Finished at %time_current% (+%time_passed%)"
STATUS_TIME_FORMAT = None  # strftime format; None -> RFC 2822 date
STATUS_TIME_PRECISION = 3

# File name suffixes appended to the script name when no path is configured
LOG_FILE_SUFFIX = ".log"
PROGRESS_FILE_SUFFIX = ".progress"

# Diagnostics log of the toolkit itself (None -> stderr warnings only)
LOG_FILE = None
VERBOSE = False
