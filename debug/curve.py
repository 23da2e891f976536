
from motion.spring import DampedHarmonicSpring, sample_curve
import config

for name in ("Preview", "PictureInPicture"):
    spring = DampedHarmonicSpring.from_preset(getattr(config.SpringPreset, name))
    print(f"{name}: zeta={spring.damping_ratio:.3f} response={spring.frequency_response:.3f}s regime={spring.regime.value}")
    print(f"  m={spring.mass} k={spring.stiffness:.3f} c={spring.damping_coefficient:.3f}")
    t, s = sample_curve(spring, count=21)
    for ti, si in zip(t, s):
        print(f"  t={ti:5.2f}  s={si: .5f}")
