"""Engine pieces for a small voxel sandbox game: collision boxes, frustum culling, camera, layers, input, logging and OpenGL helpers."""

__version__ = "0.0.1"