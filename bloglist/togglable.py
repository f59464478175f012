"""
Show/hide view state for the index page.

A Togglable owns one boolean. When hidden, only the open button renders;
when visible, the wrapped content renders followed by a cancel button.
"""

from dataclasses import dataclass

from markupsafe import Markup, escape


@dataclass
class Togglable:
    button_label: str
    visible: bool = False

    def toggle_visibility(self) -> bool:
        self.visible = not self.visible
        return self.visible

    @property
    def hide_when_visible(self) -> str:
        """CSS display value for the collapsed branch."""
        return "none" if self.visible else ""

    @property
    def show_when_visible(self) -> str:
        """CSS display value for the expanded branch."""
        return "" if self.visible else "none"

    def render(self, children: str, toggle_url: str = "?form=open", cancel_url: str = "?") -> Markup:
        """
        Render both branches; CSS display decides which one shows.

        Args:
            children: Trusted HTML for the expanded branch
            toggle_url: Link followed by the open button
            cancel_url: Link followed by the cancel button
        """
        return Markup(
            '<div class="togglable">'
            f'<div style="display: {self.hide_when_visible}">'
            f'<a class="button" href="{escape(toggle_url)}">{escape(self.button_label)}</a>'
            "</div>"
            f'<div style="display: {self.show_when_visible}">'
            f"{Markup(children)}"
            f'<a class="button" href="{escape(cancel_url)}">cancel</a>'
            "</div>"
            "</div>"
        )
