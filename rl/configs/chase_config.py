"""
Training configuration for the chase environment
"""

# Environment parameters (defaults match the interactive game)
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "field_size": 400,
    "max_steps": 1200,  # 20 seconds at 60 FPS
    "player_speed": 20.0,
    "creeper_speed": 1.5,
    "player_size": 20.0,
    "creeper_size": 20.0,
    "safe_house_size": 40.0,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "r_win": 1.0,        # Reaching the safe house
    "r_loss": 1.0,       # Caught by the creeper
    "r_time": 0.001,     # Per-tick penalty
    "r_progress": 0.5,   # Scaled by distance gained toward the safe house
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 50_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.2,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 200_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}


def get_env_kwargs(**overrides):
    """Environment + reward kwargs for ChaseEnv, with optional overrides"""
    kwargs = dict(ENV_CONFIG)
    kwargs.update(REWARD_CONFIG)
    unknown = set(overrides) - set(kwargs) - {"render_mode"}
    if unknown:
        raise ValueError(f"Unknown environment options: {sorted(unknown)}")
    kwargs.update(overrides)
    return kwargs
