"""Application constants."""

# Accepted ranges per field (inclusive)
WEIGHT_RANGE = (20, 200)
BMI_RANGE = (10, 50)
BODY_FAT_RANGE = (0, 50)
MUSCLE_MASS_RANGE = (0, 100)
VISCERAL_FAT_RANGE = (0, 30)
CALORIES_RANGE = (0, 5000)

# Validation messages, in the order checks run
MSG_DATE_REQUIRED = "Date is required"
MSG_WEIGHT_REQUIRED = "Weight is required and must be greater than 0"
MSG_WEIGHT_RANGE = "Weight must be between 20kg and 200kg"
MSG_BMI_RANGE = "BMI must be between 10 and 50"
MSG_BODY_FAT_RANGE = "Body fat must be between 0% and 50%"
MSG_MUSCLE_MASS_RANGE = "Muscle mass must be between 0kg and 100kg"
MSG_VISCERAL_FAT_RANGE = "Visceral fat must be between level 0 and 30"
MSG_CALORIES_RANGE = "Calories must be between 0kcal and 5000kcal"

# Shown by clients when app info is unavailable
UNKNOWN_APP_INFO = "--"
