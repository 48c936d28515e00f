"""HTML event handler attributes."""

from __future__ import annotations

from typing import Any

from markupkit.nodes import Attribute, new_attribute


def on_abort(*args: Any) -> Attribute:
    """The ``onabort`` event attribute."""
    return new_attribute("onabort", *args)


def on_before_unload(*args: Any) -> Attribute:
    """The ``onbeforeunload`` event attribute."""
    return new_attribute("onbeforeunload", *args)


def on_blur(*args: Any) -> Attribute:
    """The ``onblur`` event attribute."""
    return new_attribute("onblur", *args)


def on_can_play(*args: Any) -> Attribute:
    """The ``oncanplay`` event attribute."""
    return new_attribute("oncanplay", *args)


def on_can_play_through(*args: Any) -> Attribute:
    """The ``oncanplaythrough`` event attribute."""
    return new_attribute("oncanplaythrough", *args)


def on_change(*args: Any) -> Attribute:
    """The ``onchange`` event attribute."""
    return new_attribute("onchange", *args)


def on_click(*args: Any) -> Attribute:
    """The ``onclick`` event attribute."""
    return new_attribute("onclick", *args)


def on_context_menu(*args: Any) -> Attribute:
    """The ``oncontextmenu`` event attribute."""
    return new_attribute("oncontextmenu", *args)


def on_copy(*args: Any) -> Attribute:
    """The ``oncopy`` event attribute."""
    return new_attribute("oncopy", *args)


def on_cut(*args: Any) -> Attribute:
    """The ``oncut`` event attribute."""
    return new_attribute("oncut", *args)


def on_dbl_click(*args: Any) -> Attribute:
    """The ``ondblclick`` event attribute."""
    return new_attribute("ondblclick", *args)


def on_drag(*args: Any) -> Attribute:
    """The ``ondrag`` event attribute."""
    return new_attribute("ondrag", *args)


def on_drag_end(*args: Any) -> Attribute:
    """The ``ondragend`` event attribute."""
    return new_attribute("ondragend", *args)


def on_drag_enter(*args: Any) -> Attribute:
    """The ``ondragenter`` event attribute."""
    return new_attribute("ondragenter", *args)


def on_drag_leave(*args: Any) -> Attribute:
    """The ``ondragleave`` event attribute."""
    return new_attribute("ondragleave", *args)


def on_drag_over(*args: Any) -> Attribute:
    """The ``ondragover`` event attribute."""
    return new_attribute("ondragover", *args)


def on_drag_start(*args: Any) -> Attribute:
    """The ``ondragstart`` event attribute."""
    return new_attribute("ondragstart", *args)


def on_drop(*args: Any) -> Attribute:
    """The ``ondrop`` event attribute."""
    return new_attribute("ondrop", *args)


def on_duration_change(*args: Any) -> Attribute:
    """The ``ondurationchange`` event attribute."""
    return new_attribute("ondurationchange", *args)


def on_ended(*args: Any) -> Attribute:
    """The ``onended`` event attribute."""
    return new_attribute("onended", *args)


def on_error(*args: Any) -> Attribute:
    """The ``onerror`` event attribute."""
    return new_attribute("onerror", *args)


def on_focus(*args: Any) -> Attribute:
    """The ``onfocus`` event attribute."""
    return new_attribute("onfocus", *args)


def on_hash_change(*args: Any) -> Attribute:
    """The ``onhashchange`` event attribute."""
    return new_attribute("onhashchange", *args)


def on_input(*args: Any) -> Attribute:
    """The ``oninput`` event attribute."""
    return new_attribute("oninput", *args)


def on_invalid(*args: Any) -> Attribute:
    """The ``oninvalid`` event attribute."""
    return new_attribute("oninvalid", *args)


def on_key_down(*args: Any) -> Attribute:
    """The ``onkeydown`` event attribute."""
    return new_attribute("onkeydown", *args)


def on_key_press(*args: Any) -> Attribute:
    """The ``onkeypress`` event attribute."""
    return new_attribute("onkeypress", *args)


def on_key_up(*args: Any) -> Attribute:
    """The ``onkeyup`` event attribute."""
    return new_attribute("onkeyup", *args)


def on_load(*args: Any) -> Attribute:
    """The ``onload`` event attribute."""
    return new_attribute("onload", *args)


def on_loaded_data(*args: Any) -> Attribute:
    """The ``onloadeddata`` event attribute."""
    return new_attribute("onloadeddata", *args)


def on_loaded_metadata(*args: Any) -> Attribute:
    """The ``onloadedmetadata`` event attribute."""
    return new_attribute("onloadedmetadata", *args)


def on_mouse_down(*args: Any) -> Attribute:
    """The ``onmousedown`` event attribute."""
    return new_attribute("onmousedown", *args)


def on_mouse_enter(*args: Any) -> Attribute:
    """The ``onmouseenter`` event attribute."""
    return new_attribute("onmouseenter", *args)


def on_mouse_leave(*args: Any) -> Attribute:
    """The ``onmouseleave`` event attribute."""
    return new_attribute("onmouseleave", *args)


def on_mouse_move(*args: Any) -> Attribute:
    """The ``onmousemove`` event attribute."""
    return new_attribute("onmousemove", *args)


def on_mouse_out(*args: Any) -> Attribute:
    """The ``onmouseout`` event attribute."""
    return new_attribute("onmouseout", *args)


def on_mouse_over(*args: Any) -> Attribute:
    """The ``onmouseover`` event attribute."""
    return new_attribute("onmouseover", *args)


def on_mouse_up(*args: Any) -> Attribute:
    """The ``onmouseup`` event attribute."""
    return new_attribute("onmouseup", *args)


def on_page_hide(*args: Any) -> Attribute:
    """The ``onpagehide`` event attribute."""
    return new_attribute("onpagehide", *args)


def on_page_show(*args: Any) -> Attribute:
    """The ``onpageshow`` event attribute."""
    return new_attribute("onpageshow", *args)


def on_paste(*args: Any) -> Attribute:
    """The ``onpaste`` event attribute."""
    return new_attribute("onpaste", *args)


def on_pause(*args: Any) -> Attribute:
    """The ``onpause`` event attribute."""
    return new_attribute("onpause", *args)


def on_play(*args: Any) -> Attribute:
    """The ``onplay`` event attribute."""
    return new_attribute("onplay", *args)


def on_playing(*args: Any) -> Attribute:
    """The ``onplaying`` event attribute."""
    return new_attribute("onplaying", *args)


def on_pop_state(*args: Any) -> Attribute:
    """The ``onpopstate`` event attribute."""
    return new_attribute("onpopstate", *args)


def on_progress(*args: Any) -> Attribute:
    """The ``onprogress`` event attribute."""
    return new_attribute("onprogress", *args)


def on_rate_change(*args: Any) -> Attribute:
    """The ``onratechange`` event attribute."""
    return new_attribute("onratechange", *args)


def on_reset(*args: Any) -> Attribute:
    """The ``onreset`` event attribute."""
    return new_attribute("onreset", *args)


def on_resize(*args: Any) -> Attribute:
    """The ``onresize`` event attribute."""
    return new_attribute("onresize", *args)


def on_scroll(*args: Any) -> Attribute:
    """The ``onscroll`` event attribute."""
    return new_attribute("onscroll", *args)


def on_seeked(*args: Any) -> Attribute:
    """The ``onseeked`` event attribute."""
    return new_attribute("onseeked", *args)


def on_seeking(*args: Any) -> Attribute:
    """The ``onseeking`` event attribute."""
    return new_attribute("onseeking", *args)


def on_select(*args: Any) -> Attribute:
    """The ``onselect`` event attribute."""
    return new_attribute("onselect", *args)


def on_stalled(*args: Any) -> Attribute:
    """The ``onstalled`` event attribute."""
    return new_attribute("onstalled", *args)


def on_submit(*args: Any) -> Attribute:
    """The ``onsubmit`` event attribute."""
    return new_attribute("onsubmit", *args)


def on_suspend(*args: Any) -> Attribute:
    """The ``onsuspend`` event attribute."""
    return new_attribute("onsuspend", *args)


def on_time_update(*args: Any) -> Attribute:
    """The ``ontimeupdate`` event attribute."""
    return new_attribute("ontimeupdate", *args)


def on_toggle(*args: Any) -> Attribute:
    """The ``ontoggle`` event attribute."""
    return new_attribute("ontoggle", *args)


def on_unload(*args: Any) -> Attribute:
    """The ``onunload`` event attribute."""
    return new_attribute("onunload", *args)


def on_volume_change(*args: Any) -> Attribute:
    """The ``onvolumechange`` event attribute."""
    return new_attribute("onvolumechange", *args)


def on_waiting(*args: Any) -> Attribute:
    """The ``onwaiting`` event attribute."""
    return new_attribute("onwaiting", *args)


def on_pointer_down(*args: Any) -> Attribute:
    """The ``onpointerdown`` event attribute."""
    return new_attribute("onpointerdown", *args)


def on_pointer_up(*args: Any) -> Attribute:
    """The ``onpointerup`` event attribute."""
    return new_attribute("onpointerup", *args)


def on_pointer_move(*args: Any) -> Attribute:
    """The ``onpointermove`` event attribute."""
    return new_attribute("onpointermove", *args)


def on_pointer_enter(*args: Any) -> Attribute:
    """The ``onpointerenter`` event attribute."""
    return new_attribute("onpointerenter", *args)


def on_pointer_leave(*args: Any) -> Attribute:
    """The ``onpointerleave`` event attribute."""
    return new_attribute("onpointerleave", *args)


def on_pointer_over(*args: Any) -> Attribute:
    """The ``onpointerover`` event attribute."""
    return new_attribute("onpointerover", *args)


def on_pointer_out(*args: Any) -> Attribute:
    """The ``onpointerout`` event attribute."""
    return new_attribute("onpointerout", *args)


def on_pointer_cancel(*args: Any) -> Attribute:
    """The ``onpointercancel`` event attribute."""
    return new_attribute("onpointercancel", *args)


def on_touch_start(*args: Any) -> Attribute:
    """The ``ontouchstart`` event attribute."""
    return new_attribute("ontouchstart", *args)


def on_touch_move(*args: Any) -> Attribute:
    """The ``ontouchmove`` event attribute."""
    return new_attribute("ontouchmove", *args)


def on_touch_end(*args: Any) -> Attribute:
    """The ``ontouchend`` event attribute."""
    return new_attribute("ontouchend", *args)


def on_touch_cancel(*args: Any) -> Attribute:
    """The ``ontouchcancel`` event attribute."""
    return new_attribute("ontouchcancel", *args)


def on_animation_start(*args: Any) -> Attribute:
    """The ``onanimationstart`` event attribute."""
    return new_attribute("onanimationstart", *args)


def on_animation_end(*args: Any) -> Attribute:
    """The ``onanimationend`` event attribute."""
    return new_attribute("onanimationend", *args)


def on_animation_iteration(*args: Any) -> Attribute:
    """The ``onanimationiteration`` event attribute."""
    return new_attribute("onanimationiteration", *args)


def on_transition_end(*args: Any) -> Attribute:
    """The ``ontransitionend`` event attribute."""
    return new_attribute("ontransitionend", *args)


def on_before_input(*args: Any) -> Attribute:
    """The ``onbeforeinput`` event attribute."""
    return new_attribute("onbeforeinput", *args)


def on_slot_change(*args: Any) -> Attribute:
    """The ``onslotchange`` event attribute."""
    return new_attribute("onslotchange", *args)


def on_form_data(*args: Any) -> Attribute:
    """The ``onformdata`` event attribute."""
    return new_attribute("onformdata", *args)