#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Preflight Check Script

Check dependencies, configuration and a reference classification run
"""

import sys
from pathlib import Path

# Allow running from a source checkout without installing
current_dir = Path(__file__).parent
if str(current_dir) not in sys.path:
    sys.path.insert(0, str(current_dir))


def reference_pose():
    """Upright, well-seated driver seen from the right, 33 MediaPipe points."""
    from driveposture.pose import Landmark, PoseLandmark

    points = [Landmark(x=0.5, y=0.5, visibility=0.0) for _ in range(33)]
    placed = {
        PoseLandmark.NOSE: (0.42, 0.22),
        PoseLandmark.LEFT_EYE: (0.48, 0.4),
        PoseLandmark.RIGHT_EYE: (0.52, 0.4),
        PoseLandmark.RIGHT_SHOULDER: (0.38, 0.36),
        PoseLandmark.RIGHT_ELBOW: (0.62, 0.52),
        PoseLandmark.RIGHT_WRIST: (0.78, 0.45),
        PoseLandmark.RIGHT_HIP: (0.44, 0.65),
        PoseLandmark.RIGHT_KNEE: (0.72, 0.66),
        PoseLandmark.RIGHT_ANKLE: (0.80, 0.90),
        PoseLandmark.LEFT_SHOULDER: (0.40, 0.42),
        PoseLandmark.LEFT_ELBOW: (0.38, 0.55),
        PoseLandmark.LEFT_WRIST: (0.46, 0.60),
        PoseLandmark.LEFT_HIP: (0.45, 0.70),
    }
    for index, (x, y) in placed.items():
        points[index] = Landmark(x=x, y=y, visibility=0.95)
    return points


def preflight_check(config_path=None):
    """
    Execute preflight checks

    Args:
        config_path: Configuration file path (optional)

    Returns:
        bool: Whether preflight passed
    """
    print("\n" + "="*70)
    print("Running preflight checks...")
    print("="*70)

    print(f"\n[OK] Python {sys.version_info.major}.{sys.version_info.minor}")

    try:
        import numpy as np
        print(f"[OK] NumPy {np.__version__}")
    except ImportError:
        print("[FAIL] NumPy not installed")
        return False

    from driveposture.core.config_loader import find_config_path, get_config

    config_file = Path(config_path) if config_path is not None else find_config_path()
    if config_file.exists():
        print(f"[OK] Config file: {config_file}")
    else:
        print(f"[FAIL] Config file not found: {config_file}")
        return False

    from driveposture.pose import (
        PostureThresholds,
        ViewMode,
        analyze_pose,
        feedback_from_config,
    )

    try:
        config = get_config(config_path=config_file, reload=True)
        mode = ViewMode.parse(config.view_mode)
        thresholds = PostureThresholds.from_config(config)
        feedback = feedback_from_config(config)
        include_knee = bool(config.ergonomics.get("include_knee", True))
    except (FileNotFoundError, ValueError) as e:
        print(f"[FAIL] Invalid configuration: {e}")
        return False
    print(f"[OK] Configuration valid (default view mode: {mode.value})")

    print("\n[CHECKING] Reference pose classification...")
    landmarks = reference_pose()
    for view in ViewMode:
        result = analyze_pose(landmarks, view, thresholds=thresholds,
                              feedback=feedback, include_knee=include_knee)
        if result is None:
            print(f"[FAIL] {view.value} view produced no result for the reference pose")
            return False
        summary = ", ".join(
            f"{name}={item['status']}"
            for name, item in result.to_dict().items()
            if isinstance(item, dict)
        )
        print(f"[OK] {view.value}: {summary}")

    print("\n" + "="*70)
    print("Preflight checks completed successfully")
    print("="*70 + "\n")

    return True


def main():
    """Command line entry point"""
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    success = preflight_check(config_path)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
