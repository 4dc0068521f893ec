# materialhue

Color utilities for building Material-style color palettes in pure Python,
with no dependencies outside the standard library.

Colors are handled as ARGB tuples of four integers, `(alpha, red, green, blue)`,
each in the range 0–255.

## What it offers

- **Color space helpers** (`materialhue.colorspace`): sRGB, linear RGB, XYZ,
  L\*a\*b\* and L\* conversions, plus small angle and interpolation helpers
  such as `sanitize_degrees`, `difference_degrees`, `rotation_direction` and
  `lerp`.
- **CAM16** (`materialhue.cam16`, `materialhue.viewing_conditions`): the
  `Cam16` dataclass, with hue, chroma, lightness `j`, brightness `q`,
  colorfulness `m`, saturation `s` and the CAM16-UCS coordinates `jstar`,
  `astar`, `bstar`. Colors can be built from ARGB (`Cam16.from_argb`), from
  lightness, chroma and hue (`Cam16.from_jch`) or from UCS coordinates
  (`Cam16.from_ucs`), and turned back into ARGB (`to_argb`, `viewed`).
  `Cam16.distance` gives a perceptual distance. `ViewingConditions.default()`
  is the standard environment; `ViewingConditions.make(...)` builds others.
- **HCT** (`materialhue.hct`, `materialhue.hct_solver`): `Hct` describes a
  color by hue, chroma and tone (L\*). Setting `hue`, `chroma` or `tone` solves
  for the closest displayable color, so chroma may come out lower than asked.
  `solve_to_argb` and `solve_to_cam` perform that solve directly.
- **Blending** (`materialhue.blend`): `harmonize` shifts a design color's hue
  towards a theme color (by half the difference, at most 15 degrees);
  `hct_hue` blends hue only; `cam16_ucs` blends in CAM16-UCS space.
- **Palettes** (`materialhue.palettes`): `TonalPalette` yields every tone of a
  single hue and chroma, computing and caching them on demand; `CorePalette.of`
  derives three accent palettes (`a1`, `a2`, `a3`), two neutral palettes
  (`n1`, `n2`) and an `error` palette from one key color. For content palettes
  `ColorPalette.DEFAULT`, `TRIADIC` or `ADJACENT` choose how the accent hues
  relate to the key hue.
- **Quantization**: `quantize_map` (`materialhue.quantizer_map`) counts each
  distinct color; `QuantizerWu` (`materialhue.quantizer_wu`) cuts the RGB cube
  into boxes; `quantize_wsmeans` (`materialhue.quantizer_wsmeans`) runs a
  weighted K-Means in L\*a\*b\* (via `LabPointProvider` from
  `materialhue.lab_point_provider`), taking an optional `random.Random` for
  reproducible starting state; `quantize_celebi`
  (`materialhue.quantizer_celebi`) seeds K-Means with Wu's result.

## Installation

```
pip install materialhue
```

## Examples

Describe a color in HCT and build a lighter variant:

```python
from materialhue.hct import Hct

red = Hct((0xFF, 0xFF, 0x00, 0x00))
print(red.hue, red.chroma, red.tone)

lighter = Hct.from_hct(red.hue, red.chroma, 80.0)
print(lighter.argb)

red.tone = 30.0  # re-solves the color at the new tone
```

Inspect CAM16 dimensions:

```python
from materialhue.cam16 import Cam16

cam = Cam16.from_argb((0xFF, 0xFF, 0x00, 0x00))
print(cam.j, cam.chroma, cam.hue)
assert cam.to_argb() == (0xFF, 0xFF, 0x00, 0x00)
```

Harmonize a brand color with a theme color:

```python
from materialhue.blend import harmonize

shifted = harmonize((0xFF, 0x00, 0xFF, 0x00), (0xFF, 0x00, 0x00, 0xFF))
```

Generate palettes from a key color:

```python
from materialhue.palettes import ColorPalette, CorePalette, TonalPalette

core = CorePalette.of((0xFF, 0x66, 0x50, 0xA4), True, ColorPalette.TRIADIC)
primary_40 = core.a1.tone(40)

blue_tones = TonalPalette.from_argb((0xFF, 0x00, 0x00, 0xFF))
print([blue_tones.tone(t) for t in (0, 50, 100)])
```

Extract the dominant colors from a list of pixels:

```python
from materialhue.quantizer_celebi import quantize_celebi

pixels = [(0xFF, 0xFF, 0, 0)] * 2 + [(0xFF, 0, 0xFF, 0)] * 3
result = quantize_celebi(pixels, 128)
assert result == {(255, 255, 0, 0): 2, (255, 0, 255, 0): 3}
```

## What it does not do

- It does not read or decode image files: the quantizers take pixels that
  are already ARGB tuples.
- It stops at palettes. It does not assign colors to named scheme roles
  (such as light and dark theme slots) and does not rank quantized colors by
  how well they suit a theme.
- It has no command-line interface; it is a library only.

## Running the tests

```
pip install -e .[test]
pytest
```