from .counter import counter_view, counter_page, datastar_script

__all__ = ["counter_view", "counter_page", "datastar_script"]
