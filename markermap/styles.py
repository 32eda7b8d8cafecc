"""
Front-end stylesheet for rendered marker maps.
"""

from markermap.block import (
    MAP_CONTAINER_CLASS,
    MARKER_CLASS,
    MARKER_SIZE,
    MARKERS_CLASS,
    TOOLTIP_CLASS,
)

MARKER_MAP_CSS = f'''
.{MAP_CONTAINER_CLASS} {{
    position: relative;
    display: inline-block;
    max-width: 100%;
}}
.{MAP_CONTAINER_CLASS} > img {{
    display: block;
    width: 100%;
    height: auto;
}}
.{MAP_CONTAINER_CLASS} .{MARKERS_CLASS} {{
    position: absolute;
    inset: 0;
}}
.{MAP_CONTAINER_CLASS} .{MARKER_CLASS} {{
    position: absolute;
    width: {MARKER_SIZE}px;
    height: {MARKER_SIZE}px;
    background-size: cover;
    background-repeat: no-repeat;
    /* anchor on the marker centre */
    transform: translate(-50%, -50%);
    text-decoration: none;
}}
.{MAP_CONTAINER_CLASS} .{TOOLTIP_CLASS} {{
    visibility: hidden;
    opacity: 0;
    position: absolute;
    bottom: 100%;
    left: 50%;
    transform: translateX(-50%);
    margin-bottom: 6px;
    padding: 4px 8px;
    border-radius: 4px;
    background: rgba(0, 0, 0, 0.8);
    color: #fff;
    font-size: 12px;
    white-space: nowrap;
    pointer-events: none;
    transition: opacity 0.15s;
}}
.{MAP_CONTAINER_CLASS} .{MARKER_CLASS}:hover .{TOOLTIP_CLASS} {{
    visibility: visible;
    opacity: 1;
}}
.{MAP_CONTAINER_CLASS} .{TOOLTIP_CLASS}:empty {{
    display: none;
}}
'''
