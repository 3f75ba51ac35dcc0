"""Text input widgets: station number boxes and the save-route button."""

from __future__ import annotations

import pygame

from .settings import BLACK, CYAN, GREEN, PURE_GREEN, WHITE


class NumberBox:
    """A clickable box that accepts a station number."""

    WIDTH = 80
    HEIGHT = 40
    OUTLINE = 3

    def __init__(self, placeholder: str, font):
        self.placeholder = placeholder
        self.font = font
        self.content = ""
        self.active = False
        self.fill = GREEN
        self.rect = pygame.Rect(0, 0, self.WIDTH, self.HEIGHT)
        self.label = placeholder
        self.label_pos = (0, 0)

    def set_position(self, pos) -> None:
        """Move the box's top-left corner to ``pos`` and recentre its label."""
        self.rect.topleft = (int(pos[0]), int(pos[1]))
        self._place_label()

    def _place_label(self) -> None:
        half_width = int(self.font.size(self.label)[0] / 2)
        self.label_pos = (self.rect.x + self.WIDTH // 2 - half_width, self.rect.y + 7)

    def set_content(self, content: str) -> None:
        """Replace the typed number and show it as the label."""
        self.content = content
        self.label = content

    def handle_event(self, event, mouse_pos) -> None:
        """Focus on left click, and edit the number while focused."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(mouse_pos):
                self.active, self.fill = True, WHITE
            else:
                self.active, self.fill = False, GREEN
        if not self.active:
            return
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.content = self.content[:-1]
            elif event.key == pygame.K_SPACE:
                self.content += " "
            elif event.key == pygame.K_RETURN:
                self.active, self.fill = False, CYAN
        elif event.type == pygame.TEXTINPUT:
            self.content += "".join(ch for ch in event.text if "0" <= ch <= "9")
        self.label = self.content or self.placeholder
        self._place_label()

    def draw(self, surface) -> None:
        """Draw the outlined box and its label."""
        pygame.draw.rect(surface, GREEN, self.rect.inflate(2 * self.OUTLINE, 2 * self.OUTLINE))
        pygame.draw.rect(surface, self.fill, self.rect)
        surface.blit(self.font.render(self.label, True, BLACK), self.label_pos)


class SaveBox:
    """The SAVE button with a field for naming the current route."""

    BUTTON = (905, 10, 60, 30)
    BUTTON_TEXT_POS = (912, 15)
    INPUT = (750, 10, 150, 29)
    NAME_POS = (760, 15)
    EMPTY_LABEL = "name route"

    def __init__(self, font):
        self.font = font
        self.name = ""
        self.active = False
        self.fill = GREEN
        self.button = pygame.Rect(self.BUTTON)
        self.input_rect = pygame.Rect(self.INPUT)
        self.label = ""

    def take_name(self) -> str | None:
        """Hand over a finished name and clear it, or return None if none is ready."""
        if not self.name or self.active:
            return None
        name, self.name = self.name, ""
        return name

    def handle_event(self, event, mouse_pos) -> None:
        """Open the name field on click and edit the name while it is open."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.button.collidepoint(mouse_pos):
                self.active, self.fill = True, PURE_GREEN
            else:
                self.active, self.fill = False, GREEN
        if not self.active:
            return
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_BACKSPACE:
                self.name = self.name[:-1]
            elif event.key == pygame.K_SPACE:
                self.name += " "
            elif event.key == pygame.K_RETURN:
                self.active = False
        elif event.type == pygame.TEXTINPUT:
            self.name += "".join(ch for ch in event.text if "0" <= ch < "z")
        self.label = self.name or self.EMPTY_LABEL

    def draw(self, surface) -> None:
        """Draw the button, and the name field while it is open."""
        pygame.draw.rect(surface, self.fill, self.button)
        surface.blit(self.font.render("SAVE", True, BLACK), self.BUTTON_TEXT_POS)
        if self.active:
            pygame.draw.rect(surface, WHITE, self.input_rect)
            pygame.draw.rect(surface, BLACK, self.input_rect, 1)
            surface.blit(self.font.render(self.label, True, BLACK), self.NAME_POS)