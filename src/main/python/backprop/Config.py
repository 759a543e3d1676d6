class Config:

    # =====================
    # Random
    # =====================
    seed = 51

    # =====================
    # Initialisation
    # =====================
    random_low = -1.0
    random_high = 1.0
    constant_value = 0.0
    # Nguyen-Widrow
    output_range = 1.0

    # =====================
    # Network
    # =====================
    show_progress = True
