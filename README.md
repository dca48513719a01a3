# openrm

Building blocks for a robot aiming pipeline: rotation matrices and
homogeneous transforms between the PnP, camera, head (gimbal), barrel and
world frames; ballistic flight-time estimation; linear and extended Kalman
filters with automatic Jacobians; transition and observation functions for
spinning armour, outposts, runes, tracked plates and projectile
trajectories; and a small layer over POSIX serial devices.

All matrices and vectors are numpy arrays.

## Installation

```
pip install openrm
```

The `test` extra installs pytest for running the test suite.

## Modules

- `openrm.timer`: time points are integer nanoseconds since the epoch.
  `get_time`, `get_double_of_s`, `get_num_of_ms`, `get_num_of_us`
  (whole units, truncated toward zero), `trans_time_to_ull`,
  `trans_ull_to_time`, and the local-time strings `get_time_str`
  (`DDHHMMSS`) and `get_ms_str` (`DDHHMMSS` plus three millisecond digits).
- `openrm.printing`: `print1d` … `print6d` and `print8d` print labelled
  values on one line in fixed-point form (`label:value`, fields separated by
  two spaces).
- `openrm.delay`: `get_fly_delay(speed, target_x, target_y, target_z)`
  returns a `FlyDelay` with the flight `time`, `yaw` and `pitch`, refining
  the pitch under gravity (9.8 m/s²) over five iterations; a non-positive
  speed raises `ValueError`. `get_rotate_delay` always returns `0.0` for
  finite angles.
- `openrm.tf_rotate`: 3×3 rotations, e.g. `pnp2cam_rotation`,
  `cam2head_rotation`, `pnp2head_rotation`, `head2world_rotation`,
  `yaw_to_matrix`, the `rotate_*` helpers that apply them, and angle
  extraction with `rotation_to_armor_yaw`, `rotation_to_armor_pitch`,
  `rotation_to_rune_roll` and `rotation_to_car_yaw`.
- `openrm.tf_trans`: 4×4 transforms (`pnp2cam_transform`,
  `cam2head_transform`, `pnp2head_transform`, `head2world_transform`,
  `single_yaw_transform`), the `trans_*` helpers that move a pose
  `[x, y, z, w]` while keeping `w`, and muzzle positions from
  `barrel2head_pose`, `barrel2axis_pose` and `barrel2world_pose`.
- `openrm.tf_tools`: `as_matrix3`, `as_vec4`, `vec3_to_vec4`,
  `pose_to_transform`, `rt_to_transform`, `gen_mat` (float32, row-major),
  `quaternion_to_rotation` and `quaternion_to_transform`.
- `openrm.jet`: dual numbers for forward-mode derivatives: `Jet`,
  `make_variables`, and `sin` / `cos` that accept numbers or jets.
- `openrm.filters`: `KF(dim_x, dim_y, q=None, r=None)` takes functions that
  build its transition and observation matrices from a shape;
  `EKF(dim_x, dim_y, q=None, r=None)` takes functions of the state and
  linearises them with jets. Both have `predict`, `update` and `restart`.
- `openrm.models`: generic centre and single-target models
  (`CenterModelTransition`, `CenterModelObservation`,
  `SingleModelTransition`, `SingleModelObservation`, `KFSingleTransition`,
  `KFSingleObservation`).
- `openrm.motion_armor`: spinning-target and outpost models
  (`AntitopTransition`, `AntitopObservation`, `AntitopCenterTransition`,
  `AntitopCenterObservation`, `AntitopOmegaTransition`,
  `AntitopOmegaObservation`, `OutpostTransition`, `OutpostObservation`,
  `OutpostV2Transition`, `OutpostV2Observation`, `OutpostOmegaTransition`,
  `OutpostOmegaObservation`) and the constants `OUTPOST_OMEGA`, `OUTPOST_R`.
- `openrm.motion_track`: tracked-plate and trajectory models
  (`TrackQueueV1Transition`, `TrackQueueV1Observation`,
  `TrackQueueTransition`, `TrackQueueObservation`, `TrackQueueV4Transition`,
  `TrackQueueV4Observation`, `TrajectoryTransition`,
  `TrajectoryObservation`) and `TrackState`, which holds one target's
  `EKF`, last pose and counters and is updated with `refresh(pose, t)`.
- `openrm.motion_rune`: rune models (`SmallRuneTransition`,
  `BigRuneTransition`, `RuneObservation`, `RuneSpeedTransition`,
  `RuneSpeedObservation`) and the rune constants.
- `openrm.serial_port`: `list_serial_ports(SerialType.TTY_USB)` and the
  other `SerialType` families; `SerialPort(SerialConfig(name, ...),
  auto_restart=False)` with `open`, `close`, `restart`, `read(length)`,
  `write(data)`, `init_head(struct_size, sof)`, and use as a context
  manager. Failures raise `SerialError`; progress is logged through the
  `logging` module.
- `openrm.readings`: `read_values(path)` returns the leading
  whitespace-separated numbers of a text file and logs an error when their
  count is not a multiple of three.

## Example

```python
import numpy as np
from openrm.delay import get_fly_delay
from openrm.filters import EKF
from openrm.models import SingleModelTransition, SingleModelObservation

shot = get_fly_delay(25.0, 5.0, 1.0, 0.3)
print(shot.time, shot.yaw, shot.pitch)

ekf = EKF(9, 4)
ekf.predict(SingleModelTransition(dt=0.01))
ekf.update(SingleModelObservation(), np.array([1.0, 0.5, 0.2, 0.0]))
print(ekf.estimate_x)
```

## What this package does not do

- It has no command-line program: there is no dashboard, monitor or
  oscilloscope view.
- It does not capture images from cameras of any kind.
- It provides the motion models and filters, but not ready-made trackers
  that keep target lists, handle armour switching or decide when to fire;
  those are left to the caller to assemble from `openrm.filters` and the
  `openrm.motion_*` modules.
- The serial layer works only on POSIX systems with terminal devices under
  `/dev`.