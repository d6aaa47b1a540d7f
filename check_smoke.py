import importlib

mods = [
    "dsystrace",
    "dsystrace.time_grid", "dsystrace.particles", "dsystrace.fields", "dsystrace.system",
    "dsystrace.integrators", "dsystrace.integrators.base", "dsystrace.integrators.euler",
    "dsystrace.integrators.adams_bashforth",
    "dsystrace.io", "dsystrace.io.json_io",
    "dsystrace.visualization", "dsystrace.visualization.static",
    "dsystrace.utils", "dsystrace.utils.config", "dsystrace.utils.logging",
]

for m in mods:
    try:
        importlib.import_module(m)
    except Exception as e:
        print("Failed:", m, "->", repr(e))
