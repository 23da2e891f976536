import logging
import pygame
import numpy as np

from motion.spring import DampedHarmonicSpring, SpringTimingParameters, sample_curve
from motion.projection import DecelerationRate, intended_endpoint, project_point, reduce_secondary_axis
from motion.endpoints import Corner, corner_centers
from motion.vector import round_to_pixel, distance
from logging_config import setup_logging
import config

logger = logging.getLogger("motion.demo")


class Card:
    """드래그 가능한 PIP 카드 상태 (idle / interaction / animating)"""
    def __init__(self, center, endpoint: Corner):
        self.center = np.asarray(center, dtype=float).copy()
        self.endpoint = endpoint
        self.state = "idle"
        self.grab_offset = np.zeros(2, dtype=float)
        # animating
        self.timing: SpringTimingParameters | None = None
        self.start = None
        self.target = None
        self.elapsed = 0.0

    def contains(self, p) -> bool:
        w, h = config.Layout.card_size
        d = np.asarray(p, dtype=float) - self.center
        return abs(d[0]) <= w / 2 and abs(d[1]) <= h / 2


class VelocityTracker:
    """최근 포인터 샘플로 속도 추정 [px/s]"""
    def __init__(self, window: float = 0.08):
        self.window = float(window)
        self.samples = []

    def reset(self):
        self.samples.clear()

    def add(self, t: float, p):
        self.samples.append((float(t), np.asarray(p, dtype=float)))
        while len(self.samples) > 2 and t - self.samples[0][0] > self.window:
            self.samples.pop(0)

    def velocity(self) -> np.ndarray:
        if len(self.samples) < 2:
            return np.zeros(2, dtype=float)
        (t0, p0), (t1, p1) = self.samples[0], self.samples[-1]
        if t1 - t0 <= 0.0:
            return np.zeros(2, dtype=float)
        return (p1 - p0) / (t1 - t0)


def draw_text(screen, font, x, y, s, color=(220, 220, 220)):
    surf = font.render(s, True, color)
    screen.blit(surf, (x, y))
    return y + surf.get_height() + 2


def draw_crosshair(screen, p, color=(110, 110, 130)):
    cx, cy = int(p[0]), int(p[1])
    L = 8
    pygame.draw.line(screen, color, (cx - L, cy), (cx + L, cy), 2)
    pygame.draw.line(screen, color, (cx, cy - L), (cx, cy + L), 2)


def card_rect(center):
    w, h = config.Layout.card_size
    return pygame.Rect(int(round(center[0] - w / 2)), int(round(center[1] - h / 2)), int(w), int(h))


def draw_endpoints(screen, endpoints, selected=None):
    for corner, c in endpoints.items():
        col = (120, 190, 120) if corner is selected else (70, 70, 80)
        pygame.draw.rect(screen, col, card_rect(c), width=2, border_radius=10)


def draw_card(screen, card: Card):
    col = (255, 240, 140) if card.state == "interaction" else (200, 200, 220)
    pygame.draw.rect(screen, col, card_rect(card.center), border_radius=10)


def draw_graph(screen, font, spring: DampedHarmonicSpring, rect):
    """운동 방정식 s(t) 그래프"""
    x0, y0, w, h = rect
    pygame.draw.rect(screen, (40, 40, 48), rect)
    t, s = sample_curve(spring)
    t_min, t_max = config.Graph.time_range
    s_min, s_max = -1.0, 1.0
    pad = 8
    mid = y0 + pad + (h - 2 * pad) * 0.5
    pygame.draw.line(screen, (90, 90, 100), (x0 + pad, mid), (x0 + w - pad, mid), 1)
    pts = []
    for ti, si in zip(t, s):
        px = x0 + pad + (ti - t_min) / (t_max - t_min) * (w - 2 * pad)
        py = y0 + pad + (1.0 - (np.clip(si, s_min, s_max) - s_min) / (s_max - s_min)) * (h - 2 * pad)
        pts.append((px, py))
    pygame.draw.lines(screen, (255, 80, 80), False, pts, 2)
    draw_text(screen, font, x0 + pad, y0 + h - 18, f"zeta={spring.damping_ratio:.2f} response={spring.frequency_response:.2f}s")


def main():
    setup_logging(level=logging.INFO)

    pygame.init()
    W, H = 1000, 800
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("Spring Animation Debug View")

    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 18)
    font_small = pygame.font.SysFont("consolas", 14)

    # pygame 좌표는 논리 픽셀 = 물리 픽셀
    pixel_scale = 1.0

    presets = {
        pygame.K_1: ("PictureInPicture", config.SpringPreset.PictureInPicture),
        pygame.K_2: ("Preview", config.SpringPreset.Preview),
    }
    preset_name, preset = presets[pygame.K_1]
    spring = DampedHarmonicSpring.from_preset(preset)

    rate = DecelerationRate.NORMAL
    hud_enabled = True

    endpoints = corner_centers((0.0, 0.0, float(W), float(H)))
    card = Card(endpoints[Corner.BOTTOM_RIGHT], Corner.BOTTOM_RIGHT)
    tracker = VelocityTracker()
    last_velocity = np.zeros(2, dtype=float)
    last_projection = None

    now = 0.0
    running = True

    while running:
        dt = clock.tick(60) / 1000.0
        now += dt

        # -------- events --------
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False

            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_h:
                    hud_enabled = not hud_enabled
                elif ev.key == pygame.K_f:
                    rate = DecelerationRate.FAST if rate is DecelerationRate.NORMAL else DecelerationRate.NORMAL
                elif ev.key in presets:
                    preset_name, preset = presets[ev.key]
                    spring = DampedHarmonicSpring.from_preset(preset)
                    logger.info("spring preset %s: %s", preset_name, spring)

            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                if card.contains(ev.pos):
                    # 진행 중인 애니메이션은 그 자리에서 멈춤
                    card.state = "interaction"
                    card.timing = None
                    card.grab_offset = card.center - np.asarray(ev.pos, dtype=float)
                    tracker.reset()
                    tracker.add(now, ev.pos)

            elif ev.type == pygame.MOUSEMOTION and card.state == "interaction":
                tracker.add(now, ev.pos)
                card.center = round_to_pixel(np.asarray(ev.pos, dtype=float) + card.grab_offset, pixel_scale)

            elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1 and card.state == "interaction":
                tracker.add(now, ev.pos)
                velocity = tracker.velocity()
                endpoint = intended_endpoint(velocity, card.center, endpoints, rate)
                target = endpoints[endpoint]

                start, timing = spring.timing_function(velocity, card.center, target, pixel_scale=pixel_scale)
                card.center = start
                card.start = start
                card.target = target
                card.timing = timing
                card.endpoint = endpoint
                card.elapsed = 0.0
                card.state = "animating"

                last_velocity = velocity
                last_projection = project_point(reduce_secondary_axis(velocity), start, rate)
                logger.info("release v=(%.1f, %.1f) -> %s", velocity[0], velocity[1], endpoint.value)

        # -------- animate --------
        if card.state == "animating":
            card.elapsed += dt
            card.center = card.timing.value_at(card.elapsed, card.start, card.target)
            # 물리 픽셀 반 개 이내로 충분히 오래 머물면 끝
            if card.elapsed > spring.frequency_response and distance(card.center, card.target) < 0.5 / pixel_scale:
                card.center = np.asarray(card.target, dtype=float).copy()
                card.state = "idle"
                card.timing = None

        # -------- render --------
        screen.fill((18, 18, 22))
        draw_endpoints(screen, endpoints, selected=card.endpoint)
        if last_projection is not None:
            draw_crosshair(screen, last_projection, color=(80, 200, 255))
        draw_card(screen, card)

        # -------- HUD --------
        if hud_enabled:
            y = 8
            y = draw_text(screen, font, W // 2 - 220, y, f"Spring[1/2]={preset_name} Deceleration[F]={rate.name} HUD[H]")
            y = draw_text(screen, font, W // 2 - 220, y, f"state={card.state} endpoint={card.endpoint.value}")
            y = draw_text(screen, font, W // 2 - 220, y, f"last velocity=({last_velocity[0]: .1f},{last_velocity[1]: .1f})")
            draw_graph(screen, font_small, spring, (W // 2 - 200, H // 2 - 90, 400, 180))

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
