"""
Environment and evaluation configuration for Diamond Bandit
Reward shaping presets mirror the environment's reward keys
"""

# Environment parameters
ENV_CONFIG = {
    "dt": 1/30,
    "max_steps": 3600,  # 2 minutes at 30 FPS
    "k_enemies": 5,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# BASELINE: diamonds matter, hits cost as much as a diamond is worth
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced reward shaping",
    "R_GOAL": 1.0,       # Reward for taking the diamond
    "R_HIT": 1.0,        # Penalty for touching an enemy (restart)
    "R_VICTORY": 5.0,    # Bonus for the final diamond
    "R_TIME": 0.001,     # Small time penalty
}

# CAUTIOUS: restarts are expensive, time is cheap
REWARD_CONFIG_CAUTIOUS = {
    "name": "cautious",
    "description": "Heavy hit penalty - encourages dodging over speed",
    "R_GOAL": 1.0,
    "R_HIT": 4.0,
    "R_VICTORY": 5.0,
    "R_TIME": 0.0002,
}

# RUSH: finish fast, accept risk
REWARD_CONFIG_RUSH = {
    "name": "rush",
    "description": "Higher time penalty and diamond reward - encourages direct routes",
    "R_GOAL": 2.0,
    "R_HIT": 0.5,
    "R_VICTORY": 5.0,
    "R_TIME": 0.005,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "cautious": REWARD_CONFIG_CAUTIOUS,
    "rush": REWARD_CONFIG_RUSH,
}

# ==============================================================================
# EVALUATION
# ==============================================================================

EVAL_CONFIG = {
    "seeds": [42, 123, 456],
    "n_episodes": 10,
    "policies": ["random", "greedy"],
    "danger_radius": 90.0,  # greedy policy flees enemies closer than this
}
