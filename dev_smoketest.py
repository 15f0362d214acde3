import os
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

print("Iniciando smoke test...")

try:
    from isoscene.utils.iso import cartesian_to_isometric, isometric_to_cartesian
    p = (3.5, -2.0, 1.25)
    r = isometric_to_cartesian(cartesian_to_isometric(p))
    assert all(abs(a - b) < 1e-9 for a, b in zip(r, p))
    print("✅ OK iso: cartesiano<->isométrico")
except Exception as e:
    print("⚠️ Falló la transformación isométrica:", e)

try:
    from isoscene.wall.wall import build_wall_panels
    assert len(build_wall_panels("both")) == 6
    print("✅ OK paredes: 6 paneles en BOTH")
except Exception as e:
    print("⚠️ Falló el armado de paredes:", e)

try:
    from isoscene.scene import Scene
    scene = Scene.from_settings()
    print(f"✅ OK escena: {len(scene.drawables())} objetos")
except Exception as e:
    print("⚠️ Falló el armado de la escena:", e)

print("✅ Todos los módulos básicos importan correctamente.")
