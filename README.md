# trackodom

Estimate where a vehicle is on a track from two kinds of input:

- **GPS fixes** (latitude, longitude, altitude). Each fix becomes a local
  East-North-Up position relative to the first fix. The heading comes from
  consecutive positions.
- **Speed and steering readings**. These are integrated with a bicycle
  kinematic model into a planar pose (x, y, heading).

It also keeps **sector times** for a lap divided by gates. For the current
sector you get the elapsed time and the mean speed so far.

The package uses only the standard library.

## Installation

```
pip install trackodom
```

To run the test suite as well:

```
pip install "trackodom[test]"
pytest
```

## Command line

Installing the package gives you a `trackodom` command with three
subcommands. Each one reads CSV rows from a file, or from standard input when
the file is `-` or left out, and writes CSV rows to standard output. Empty
lines and lines whose first cell starts with `#` are skipped. A malformed row
stops the run with an error message that names the line.

### `trackodom gps`

Input rows: `lat,lon,alt`, with latitude and longitude in degrees.

Output rows: `x,y,yaw`, in metres and radians.

Options:

- `--semi-major-axis` (default `6378137.0`)
- `--semi-minor-axis` (default `6356752.0`)

### `trackodom odom`

Input rows: `stamp,steer,speed`, with the stamp in seconds, the
steering-wheel angle in degrees and the speed in km/h.

Output rows: `stamp,x,y,theta,v,omega`. The speed `v` is in m/s and the turn
rate `omega` is in rad/s.

Options:

- `--wheelbase` (default `1.765`)
- `--steering-factor` (default `32.0`)
- `--start-time` (default `0.0`)

### `trackodom sectors`

Input rows come in two kinds:

- `speed,v` records the latest speed.
- `gps,stamp,lat,lon` processes a fix.

For each `gps` row it writes `sector,time,mean_speed`. The command uses the
default gates listed under *Sector timing* below.

Options:

- `--start-time` (default `0.0`)

Example:

```
printf 'speed,80\ngps,1.0,45.630106,9.289490\n' | trackodom sectors
```

## Library use

### GPS odometry

```python
from trackodom.gps_odometer import GpsOdometer

odom = GpsOdometer(
    semi_major_axis=6378137.0,
    semi_minor_axis=6356752.0,
    max_distance=0.01,
    window_size=15,
)
pose = odom.update(45.6301, 9.2895, 230.0)
print(pose.x, pose.y, pose.orientation.yaw())
```

Latitude and longitude are in degrees and altitude is in metres. The first
fix becomes the origin of the local frame. Each later fix gives an east/north
position in metres, returned as an `Odometry` record with `z` set to `0.0`.

The heading is a `Quaternion` built from the yaw between the last two
positions. It is zero on the first fix, and also when the position has not
changed.

Outliers are fixes that jump more than `max_distance` radians in latitude or
longitude from the last accepted fix. In their place, the odometer uses the
mean of the last `window_size` accepted fixes.

The helpers behind it can also be used on their own. Angles are in radians.

- `geodetic_to_ecef(lat, lon, alt, semi_major_axis, semi_minor_axis)` gives
  ECEF `(x, y, z)`.
- `ecef_to_enu(dx, dy, dz, ref_lat, ref_lon)` rotates an ECEF offset into
  `(east, north, up)`.

### Speed/steering odometry

```python
from trackodom.odometer import BicycleOdometer

odom = BicycleOdometer(
    wheelbase=1.765,
    steering_factor=32.0,
    rear_offset=1.3,
    start_time=0.0,
)
pose = odom.update(steer_deg=12.0, speed_kmh=40.0, stamp=0.1)
```

The inputs are:

- `steer_deg`: the steering-wheel angle in degrees. It is divided by
  `steering_factor` to get the road-wheel angle.
- `speed_kmh`: the speed in km/h.
- `stamp`: a time in seconds. The step length is the time since the previous
  stamp, or since `start_time` for the first update.

The turn rate is the speed divided by `wheelbase / tan(angle) + rear_offset`.
It is zero when the angle is zero.

The pose starts at the origin, facing along +y (`theta = pi/2`). When the
absolute turn rate is below `1e-6`, the step is a midpoint (RK2) step.
Otherwise it follows the exact circular arc.

The returned `Odometry` carries:

- the position;
- the orientation;
- `linear_velocity` in m/s;
- `angular_velocity` in rad/s;
- the stamp.

The current pose is also available as `odom.x`, `odom.y` and `odom.theta`.

### Sector timing

```python
from trackodom.sector_times import SectorTimer

timer = SectorTimer(
    gates=[(45.630106, 9.289490), (45.623570, 9.287297), (45.616042, 9.280767)],
    tolerance=0.0005,
    max_distance=1.0,
    window_size=5,
    start_time=0.0,
)
timer.update_speed(85.0)
report = timer.update_gps(45.6301, 9.2895, stamp=12.3)
print(report.sector, report.time, report.mean_speed)
```

The gates shown are the defaults (`DEFAULT_GATES`). Coordinates are in
degrees.

A fix is at a gate when both latitude and longitude are within `tolerance` of
it. Passing gate *i* only counts while in sector *i*. It then moves to the
next sector, and the last gate leads back to sector 1. Passing a gate resets
the sector clock and the running mean speed.

Each GPS update returns a `SectorReport` with:

- `sector`: the current sector;
- `time`: the time since the sector started;
- `mean_speed`: the mean of the latest speed reading taken at each fix in
  this sector. The speed reading is `0.0` until `update_speed` is first
  called.

Fixes are passed through the same outlier filter as in GPS odometry, with
`max_distance` in degrees.

### Filtering on its own

`trackodom.filters.OutlierFilter(window_size, max_distance)` keeps a sliding
window of accepted `(lat, lon)` points. It has these members:

- `add(lat, lon)` accepts a point. When the window is full, the oldest point
  is dropped.
- `average()` returns the mean of the window. It raises `ValueError` when the
  window is empty.
- `filter(lat, lon)` returns the point unchanged and accepts it, or, for an
  outlier, returns the window mean and logs a warning.
- `points` holds the window's contents, and `len()` gives how many points it
  holds.

### Pose primitives

`trackodom.geometry` provides:

- `Quaternion(x, y, z, w)`, with a `yaw()` method;
- `quaternion_from_yaw(yaw)`;
- the `Odometry` record. Its frame ids default to `"world"` and `"vehicle"`.

## What it does not do

trackodom works on data it is given, either through function calls or as CSV
rows. It does not:

- subscribe to or publish on any live message bus;
- broadcast coordinate-frame transforms;
- read parameters from a parameter server.

The command line does not expose every setting. It has no options for these:

- the GPS outlier window and threshold;
- the bicycle model's `rear_offset`;
- the sector gates and tolerance.

To change them, use the classes directly.