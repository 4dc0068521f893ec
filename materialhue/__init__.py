"""Material color utilities: CAM16/HCT color spaces, tonal palettes, blending and quantization."""

__version__ = "0.1.0"