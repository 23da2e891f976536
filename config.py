# config.py
# 스프링 애니메이션 / 제스처 투영에 쓰이는 각종 상수 정의
# 로직 없음, 값만 정의

import math

# 임계 감쇠 판정 허용 오차 |ζ - 1| < tol 이면 임계 감쇠로 취급
CRITICAL_DAMPING_TOLERANCE = 1e-6

# 문맥(픽셀 배율) 없이 타이밍 함수를 만들 때 epsilon = |속도 * 이 값|
# 속도의 1/1000 은 한 프레임 동안의 변화량보다 훨씬 작음
VELOCITY_EPSILON_FRACTION = 1e-3

# position() 기본 초기 조건 (그래프용: 평형점에서 1 만큼 떨어진 채 정지)
DEFAULT_INITIAL_POSITION = 1.0
DEFAULT_INITIAL_VELOCITY = 0.0

# 디자인 파라미터 기반 생성자에서 고정되는 질량 [kg]
DESIGN_MASS = 1.0

TWO_PI = 2.0 * math.pi


# 스프링 프리셋 (damping_ratio, frequency_response[s])
class SpringPreset:
    Preview = (0.25, 0.5) # 설정 화면 기본값 (잘 튀는 스프링)
    PictureInPicture = (0.75, 0.25) # 페이스타임 PIP 창


# 감속률: 1ms 마다 남는 속도의 비율 (UIScrollView 기준)
class Deceleration:
    Normal = 0.998
    Fast = 0.99


# PIP 창 배치
class Layout:
    padding = 20.0 # 화면 가장자리 여백 [px]
    card_size = (100.0, 180.0) # (너비, 높이) [px]


# 운동 방정식 그래프
class Graph:
    time_range = (0.0, 2.0) # [s]
    samples = 200
