"""GPIO hardware backend for Raspberry Pi.

Provides :class:`GPIOHardwareFactory` and the individual GPIO component
classes (keypad, LEDs, display, buzzer).  Only usable on a Pi with
``gpiozero``, ``rpi-lgpio`` and ``raspberrypi-tm1637`` installed.
"""
