from monsterui.all import Theme, ThemeRadii
from fasthtml.common import fast_app, serve

from counterapp import ApplicationConfig, CounterViewModel, configure_logging, set_config
from counterapp.adapters.fasthtml import configure_app
from counterapp.ui import datastar_script

config = ApplicationConfig.from_environment()
set_config(config)
logger = configure_logging(config.logging)

monsterui_headers = Theme.zinc.headers(radii=ThemeRadii.md)

app, rt = fast_app(
    live=config.web.live,
    debug=config.web.debug,
    pico=False,
    htmx=False,
    secret_key=config.web.secret_key,
    hdrs=(
        monsterui_headers,
        datastar_script,
    ),
    htmlkw=dict(cls="bg-background font-sans antialiased"),
)

view_model = CounterViewModel(initial_count=config.counter.initial_count)
configure_app(app, rt, view_model,
              prefix=config.web.prefix,
              live_queue_size=config.counter.live_queue_size)


if __name__ == "__main__":
    logger.info(f"🎉 Counter application starting on {config.web.host}:{config.web.port}")
    serve(host=config.web.host, port=config.web.port, reload=config.web.live)
