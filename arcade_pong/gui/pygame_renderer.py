"""
PyGame renderer for the Arcade Pong game
"""

import pygame

from arcade_pong.core.entities import GameState, RunState, ScoreState
from arcade_pong.utils.config import GameConfig, game_config


class PygameRenderer:
    """PyGame-based presenter for Arcade Pong"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize the PyGame renderer"""
        self.config = config if config is not None else game_config
        self.width = self.config.FIELD_WIDTH
        self.height = self.config.FIELD_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Arcade Pong")
        self.clock = pygame.time.Clock()

        self.background_color = self.config.BACKGROUND_COLOR
        self.ball_color = self.config.BALL_COLOR
        self.paddle_color = self.config.PADDLE_COLOR
        self.net_color = self.config.NET_COLOR
        self.text_color = self.config.TEXT_COLOR

        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 36)

        # Score text is only rendered again when the score changes
        self.score_surfaces = self._render_score_surfaces(ScoreState())

    def _render_score_surfaces(self, score: ScoreState) -> tuple[pygame.Surface, pygame.Surface]:
        return (
            self.font_large.render(str(score.player), True, self.text_color),
            self.font_large.render(str(score.cpu), True, self.text_color),
        )

    def update_score(self, score: ScoreState) -> None:
        """Refresh the score displays"""
        self.score_surfaces = self._render_score_surfaces(score)

    def clear_screen(self) -> None:
        self.screen.fill(self.background_color)

    def draw_net(self) -> None:
        """Draw the dashed center line"""
        net_width = 2
        segment = 12
        x = self.width // 2 - net_width // 2
        for y in range(0, self.height, segment * 2):
            pygame.draw.rect(self.screen, self.net_color, pygame.Rect(x, y, net_width, segment))

    def draw_paddle(self, rect: tuple[float, float, float, float]) -> None:
        x, y, width, height = rect
        pygame.draw.rect(
            self.screen,
            self.paddle_color,
            pygame.Rect(int(x), int(y), int(width), int(height)),
            border_radius=6,
        )

    def draw_ball(self, position: tuple[float, float], radius: float) -> None:
        """Draw the ball and its glow"""
        glow_radius = int(radius * 3.5)
        glow = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(glow, (*self.ball_color, 20), (glow_radius, glow_radius), glow_radius)
        self.screen.blit(glow, (int(position[0]) - glow_radius, int(position[1]) - glow_radius))

        pos = (int(position[0]), int(position[1]))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(radius))

    def draw_score(self) -> None:
        player_surface, cpu_surface = self.score_surfaces

        player_rect = player_surface.get_rect()
        player_rect.centerx = self.width // 4
        player_rect.top = 20
        self.screen.blit(player_surface, player_rect)

        cpu_rect = cpu_surface.get_rect()
        cpu_rect.centerx = self.width * 3 // 4
        cpu_rect.top = 20
        self.screen.blit(cpu_surface, cpu_rect)

    def draw_pause_screen(self) -> None:
        """Draw pause screen"""
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(128)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        pause_surface = self.font_large.render("PAUSE", True, self.text_color)
        pause_rect = pause_surface.get_rect()
        pause_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(pause_surface, pause_rect)

        inst_surface = self.font_small.render("Click the window to resume", True, self.text_color)
        inst_rect = inst_surface.get_rect()
        inst_rect.center = (self.width // 2, self.height // 2 + 60)
        self.screen.blit(inst_surface, inst_rect)

    def render(self, state: GameState) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_net()
        self.draw_paddle(state.player_rect)
        self.draw_paddle(state.cpu_rect)
        self.draw_ball(state.ball_position, state.ball_radius)
        self.draw_score()

        if state.run_state is RunState.PAUSED_UNFOCUSED:
            self.draw_pause_screen()

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> None:
        """Maintain frame rate"""
        self.clock.tick(fps or self.config.FPS)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
