# Run with: staticnb run examples/projectile.py [steps]
# `nb` is provided by the runner.
import math
import sys

steps = int(sys.argv[1]) if len(sys.argv) > 1 else 40
g = 9.81
dt = 0.05
angle = math.radians(45)
x, y = 0.0, 0.0
vx, vy = 20 * math.cos(angle), 20 * math.sin(angle)

rows = []
for i in range(steps):
    x += vx * dt
    vy -= g * dt
    y += vy * dt
    if y < 0:
        print(f"landed after {i + 1} steps at x={x:.2f} m")
        break
    if i % 5 == 0:
        rows.append(f"<tr><td>{i}</td><td>{x:.2f}</td><td>{y:.2f}</td></tr>")
else:
    print(f"still flying after {steps} steps")

nb.add_content(
    "Trajectory",
    "<table><tr><th>step</th><th>x</th><th>y</th></tr>" + "".join(rows) + "</table>",
)
nb.add_content("Parameters", f"<p>g = {g}, dt = {dt}, angle = 45&deg;</p>")
nb.printf("%d samples kept\n", len(rows))
