from .reading import AccelerometerSample, GyroscopeSample, SensorReading

__all__ = ["AccelerometerSample", "GyroscopeSample", "SensorReading"]
