"""
System constants
"""


class Constants:
    """System constants"""
    # Landmark reliability
    MIN_VISIBILITY = 0.5  # landmark usable only when visibility is strictly above this
    SIDE_SWITCH_MARGIN = 0.2  # left hip must beat right hip by more than this to switch sides

    # View mode
    DEFAULT_VIEW_MODE = "side"

    # Geometry
    VIRTUAL_VERTICAL_OFFSET = 0.5  # y offset of the virtual point above the tilt origin

    # Side view angle bands (degrees, inclusive on the good side)
    BACK_ANGLE_RANGE = (5.0, 30.0)
    KNEE_ANGLE_RANGE = (100.0, 140.0)
    HIP_ANGLE_RANGE = (90.0, 115.0)
    ELBOW_ANGLE_RANGE = (90.0, 145.0)

    # Side view positional cutoffs (normalized frame units, y grows downward)
    HIP_ABOVE_KNEE_MARGIN = -0.05  # hip.y - knee.y below this means the seat is too high
    HEAD_CLEARANCE_Y = 0.1  # nose above this line means the head is near the roof

    # Front view bands
    EYE_LEVEL_RANGE = (0.25, 0.6)  # average eye y
    ARM_ANGLE_RANGE = (90.0, 150.0)  # elbow angle
