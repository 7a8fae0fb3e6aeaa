# --- Display ---
PIXELS_PER_UNIT_LENGTH = 10

# --- Interaction ---
FORCE_CONSTANT = 1000.0

# --- Particles ---
MINIMUM_PARTICLE_MASS = 10.0
MAXIMUM_PARTICLE_MASS = 30.0
MAX_INITIAL_VELOCITY = 40.0
DEFAULT_NUMBER_OF_PARTICLES = 3

# --- Timing ---
TIME_STEP = 0.01  # simulated time per step
TICK_INTERVAL = 0.01  # wall-clock seconds between steps
