"""Pomobox — Application entry point (composition root).

Wires together: Config → HardwareFactory → FrameLoop → UI.
With a screen, NiceGUI owns the event loop and the frame loop runs as a
task on it; ``app.on_startup`` / ``app.on_shutdown`` handle lifecycle.
Headless mode runs the frame loop directly on the main thread.
"""

from __future__ import annotations

import asyncio
import logging as _logging

from pomobox.config.config_manager import load_config
from pomobox.core.frame_loop import FrameLoop
from pomobox.core.interfaces.hardware import HardwareFactory
from pomobox.core.models.config import PomoboxConfig
from pomobox.hardware.factory import create_hardware_factory
from pomobox.log_config.logger import setup_logging

_log = _logging.getLogger(__name__)


def main() -> None:
    """Synchronous entry point: bootstraps and runs the timer."""

    # 1. Load configuration and logging
    config = bootstrap()

    # 2. Create hardware factory (mock on dev, GPIO on Pi)
    factory = create_hardware_factory(config)

    if config.system.headless:
        run_headless(config, factory)
    else:
        run_with_ui(config, factory)


def bootstrap() -> PomoboxConfig:
    """Load the configuration and set up logging from it.

    Logging is console-only until the config names the log directory.
    Under ``test_mode`` it stays console-only so no ``pomobox.log`` is written.
    """
    setup_logging(log_dir=None)
    config = load_config()
    log_dir = None if config.system.test_mode else config.system.log_dir
    setup_logging(config.system.log_level, log_dir)
    _log.info("Starting Pomobox (profile=%s)", config.profile.name)
    return config


def run_headless(config: PomoboxConfig, factory: HardwareFactory) -> None:
    """Run the frame loop on this thread until interrupted."""
    from pomobox.hardware.mock.mock_screen import InMemoryScreen

    factory.set_screen(InMemoryScreen())
    loop = FrameLoop.from_factory(config, factory)
    try:
        loop.run_forever()
    except KeyboardInterrupt:
        _log.info("Interrupted, stopping Pomobox")
    finally:
        factory.cleanup()
        _log.info("Pomobox stopped after %d frames", loop.frames)


def run_with_ui(config: PomoboxConfig, factory: HardwareFactory) -> None:
    """Serve the kiosk page and drive the frame loop from NiceGUI's event loop."""
    from nicegui import app, ui

    from pomobox.hardware.mock.mock_factory import MockHardwareFactory
    from pomobox.ui.layout import PomoboxLayout
    from pomobox.ui.screen import NiceGUIScreen

    # 3. Inject NiceGUIScreen into whichever factory was created.
    #    Both MockHardwareFactory and GPIOHardwareFactory support set_screen().
    nicegui_screen = NiceGUIScreen()
    factory.set_screen(nicegui_screen)

    # 4. Build the frame loop
    loop = FrameLoop.from_factory(config, factory)

    # 5. Set up UI layout, with the dev panel on mock hardware only
    dev_panel = None
    if isinstance(factory, MockHardwareFactory):
        from pomobox.ui.dev_panel import DevPanel

        dev_panel = DevPanel(factory=factory, screen_width=config.hardware.screen_width)

    layout = PomoboxLayout(screen=nicegui_screen, config=config, dev_panel=dev_panel)
    layout.setup_page()

    # 6. Wire lifecycle hooks
    stop_event = asyncio.Event()
    loop_task: asyncio.Task | None = None

    async def on_startup() -> None:
        nonlocal loop_task
        _log.info("NiceGUI startup, starting frame loop")
        loop_task = asyncio.create_task(loop.run_async(stop_event))
        _log.info("Pomobox running on http://localhost:%d", config.system.webui_port)

    async def on_shutdown() -> None:
        _log.info("NiceGUI shutdown, stopping frame loop")
        stop_event.set()
        if loop_task is not None:
            await loop_task
        factory.cleanup()
        _log.info("Pomobox stopped")

    app.on_startup(on_startup)
    app.on_shutdown(on_shutdown)

    # 7. Launch NiceGUI (blocks forever)
    ui.run(
        port=config.system.webui_port,
        title="Pomobox",
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
