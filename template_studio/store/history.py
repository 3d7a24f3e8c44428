"""Editing session store with snapshot undo/redo.

Every template-changing action appends a full deep-copied snapshot to
``history`` and drops any redo tail; ``history_index`` points at the
snapshot that is current.  Asset and preference actions (logos, fonts,
custom styles, wizard step) are not recorded in history.

Usage::

    store = TemplateStore()
    store.set_colors(primary="#112233")
    store.set_style_family(StyleFamily.BOLD)
    store.undo()                 # back to the recolored clean template
    store.redo()
"""

import copy
import dataclasses
import uuid
from datetime import datetime, timezone

from ..schema.defaults import STYLE_FONT_CONFIG, create_initial_state
from ..schema.models import (
    Layout,
    LayoutType,
    MoodPreset,
    PresetTypography,
    StyleFamily,
    StylePreset,
    TemplateState,
    TypographyStyle,
    UploadedAsset,
)


class TemplateStore:
    """Mutable editing session around an immutable-by-convention history."""

    def __init__(self, template: TemplateState | None = None) -> None:
        initial = template if template is not None else create_initial_state()
        self.history: list[TemplateState] = [copy.deepcopy(initial)]
        self.history_index = 0
        self.logos: list[UploadedAsset] = []
        self.fonts: list[UploadedAsset] = []
        self.custom_styles: list[StylePreset] = []
        self.exclude_apple_fonts = False
        self.current_step = 0

    @property
    def template(self) -> TemplateState:
        """The current snapshot.  Treat as read-only; edit through actions."""
        return self.history[self.history_index]

    @property
    def can_undo(self) -> bool:
        return self.history_index > 0

    @property
    def can_redo(self) -> bool:
        return self.history_index < len(self.history) - 1

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def _draft(self) -> TemplateState:
        return copy.deepcopy(self.template)

    def _commit(self, template: TemplateState) -> None:
        del self.history[self.history_index + 1:]
        self.history.append(template)
        self.history_index = len(self.history) - 1

    def undo(self) -> bool:
        """Step back one snapshot; a no-op at the start of history."""
        if not self.can_undo:
            return False
        self.history_index -= 1
        return True

    def redo(self) -> bool:
        """Step forward one snapshot; a no-op at the end of history."""
        if not self.can_redo:
            return False
        self.history_index += 1
        return True

    def reset_template(self) -> None:
        """Discard history and uploaded assets and start from the defaults."""
        self.history = [create_initial_state()]
        self.history_index = 0
        self.logos = []
        self.fonts = []

    # ------------------------------------------------------------------
    # Snapshot actions
    # ------------------------------------------------------------------

    def set_colors(self, **colors: str) -> None:
        """Update any of primary, secondary, neutral, background, accent."""
        draft = self._draft()
        draft.tokens.colors = dataclasses.replace(draft.tokens.colors, **colors)
        self._commit(draft)

    def set_spacing(self, **spacing: float) -> None:
        draft = self._draft()
        draft.tokens.spacing = dataclasses.replace(draft.tokens.spacing, **spacing)
        self._commit(draft)

    def set_typography(self, title: TypographyStyle | None = None,
                       body: TypographyStyle | None = None) -> None:
        draft = self._draft()
        if title is not None:
            draft.typography.title = copy.deepcopy(title)
        if body is not None:
            draft.typography.body = copy.deepcopy(body)
        self._commit(draft)

    def set_style_family(self, family: StyleFamily | str) -> None:
        """Switch family and adopt its curated font stacks and weights."""
        family = StyleFamily(family)
        fonts = STYLE_FONT_CONFIG[family]
        draft = self._draft()
        draft.style_family = family
        draft.typography.title = dataclasses.replace(
            draft.typography.title, font_family=fonts.title, weight=fonts.title_weight)
        draft.typography.body = dataclasses.replace(
            draft.typography.body, font_family=fonts.body, weight=fonts.body_weight)
        self._commit(draft)

    def _set_knob(self, name: str, value) -> None:
        draft = self._draft()
        setattr(draft, name, value)
        self._commit(draft)

    def set_mood(self, mood: MoodPreset | str) -> None:
        self._set_knob("mood", MoodPreset(mood))

    def set_spacing_density(self, density: float) -> None:
        self._set_knob("spacing_density", density)

    def set_type_scale(self, scale: float) -> None:
        self._set_knob("type_scale", scale)

    def set_contrast_level(self, level: int) -> None:
        self._set_knob("contrast_level", level)

    def toggle_layout(self, layout_type: LayoutType | str, enabled: bool) -> None:
        layout_type = LayoutType(layout_type)
        draft = self._draft()
        for layout in draft.layouts:
            if layout.type == layout_type:
                layout.enabled = enabled
        self._commit(draft)

    def update_layout(self, layout_type: LayoutType | str, layout: Layout) -> None:
        """Replace layouts of *layout_type*, keeping their type and enabled flag."""
        layout_type = LayoutType(layout_type)
        draft = self._draft()
        draft.layouts = [
            dataclasses.replace(copy.deepcopy(layout), type=layout_type, enabled=old.enabled)
            if old.type == layout_type else old
            for old in draft.layouts
        ]
        self._commit(draft)

    def apply_custom_style(self, style: StylePreset) -> None:
        """Adopt a preset's colors, fonts and knobs; empty font fields use the family's."""
        fonts = STYLE_FONT_CONFIG.get(style.style_family, STYLE_FONT_CONFIG[StyleFamily.CLEAN])
        draft = self._draft()
        draft.tokens.colors = copy.deepcopy(style.colors)
        draft.typography.title = dataclasses.replace(
            draft.typography.title,
            font_family=style.typography.title_font or fonts.title,
            weight=style.typography.title_weight or fonts.title_weight,
        )
        draft.typography.body = dataclasses.replace(
            draft.typography.body,
            font_family=style.typography.body_font or fonts.body,
            weight=style.typography.body_weight or fonts.body_weight,
        )
        draft.style_family = style.style_family
        draft.mood = style.mood
        draft.spacing_density = style.spacing_density
        draft.type_scale = style.type_scale
        draft.contrast_level = style.contrast_level
        self._commit(draft)

    # ------------------------------------------------------------------
    # Assets and preferences (not in history)
    # ------------------------------------------------------------------

    def add_logo(self, logo: UploadedAsset) -> None:
        self.logos.append(logo)

    def remove_logo(self, asset_id: str) -> None:
        self.logos = [a for a in self.logos if a.id != asset_id]

    def add_font(self, font: UploadedAsset) -> None:
        self.fonts.append(font)

    def remove_font(self, asset_id: str) -> None:
        self.fonts = [a for a in self.fonts if a.id != asset_id]

    def add_custom_style(self, style: StylePreset) -> None:
        self.custom_styles.append(style)

    def remove_custom_style(self, style_id: str) -> None:
        self.custom_styles = [s for s in self.custom_styles if s.id != style_id]

    def set_current_step(self, step: int) -> None:
        self.current_step = step

    def set_exclude_apple_fonts(self, exclude: bool) -> None:
        self.exclude_apple_fonts = exclude

    def export_style_preset(self) -> StylePreset:
        """Capture the current look as a portable preset."""
        t = self.template
        return StylePreset(
            id=str(uuid.uuid4()),
            name=f"{t.name} Style",
            description=f"Style preset exported from {t.name}",
            created_at=datetime.now(timezone.utc).isoformat(),
            colors=copy.deepcopy(t.tokens.colors),
            typography=PresetTypography(
                title_font=t.typography.title.font_family,
                body_font=t.typography.body.font_family,
                title_weight=t.typography.title.weight,
                body_weight=t.typography.body.weight,
            ),
            style_family=t.style_family,
            mood=t.mood,
            spacing_density=t.spacing_density,
            type_scale=t.type_scale,
            contrast_level=t.contrast_level,
        )
