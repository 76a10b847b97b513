from readme_motion.core.document import svg_document
from readme_motion.core.overlay import EASTER_EGG, apply_overlay, overlay


def test_overlay_only_for_sentinel():
    assert overlay(None, 100, 50) == ""
    assert overlay("nope", 100, 50) == ""
    frag = overlay(EASTER_EGG, 100, 50)
    assert 'translate(86 14)' in frag
    assert 'type="rotate"' in frag


def test_apply_overlay_inserts_before_closing_tag():
    doc = svg_document(100, 50, '  <rect width="1" height="1"/>')
    out = apply_overlay(doc, overlay(EASTER_EGG, 100, 50))
    assert out.index("rm-sparkle") < out.index("</svg>")
    assert out.endswith("</svg>\n")
    assert out.startswith(doc.split("</svg>")[0])


def test_apply_overlay_noop_without_fragment():
    doc = svg_document(10, 10, "")
    assert apply_overlay(doc, "") == doc
