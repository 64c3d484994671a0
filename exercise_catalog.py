"""
exercise_catalog.py — Static exercise library
Nested goal → workout type → ordered exercises. Loaded once, never mutated.
"""

from types import MappingProxyType

from workout_logic import Exercise

BW = ("bodyweight",)
BB = ("barbells",)
DB = ("dumbbells",)
KB = ("kettlebells",)
MACHINE = ("machine",)
CABLE = ("cables",)
BANDS = ("bands", "resistance bands")
MAT = ("yoga mat",)
ROLLER = ("foam roller",)

PUSH = "Upper Body Push"
PULL = "Upper Body Pull"
LEGS_PUSH = "Lower Body Push"
LEGS_PULL = "Lower Body Pull"


# ═══════════════════════════════════════════
# STRENGTH
# ═══════════════════════════════════════════

STRENGTH = {
    "full-body": (
        Exercise("Barbell Back Squat", 4, "6-8", rest="2 min", equipment=BB, muscle_group=LEGS_PUSH,
                 instructions="Bar across the upper back, brace, and sit down between your heels. "
                              "Drive up through the mid-foot keeping the chest proud."),
        Exercise("Conventional Deadlift", 4, "5-6", rest="2-3 min", equipment=BB, muscle_group=LEGS_PULL,
                 instructions="Hinge to grip the bar, pull the slack out, and stand up by pushing the floor away. "
                              "Keep the bar close to your shins."),
        Exercise("Bench Press", 4, "6-8", rest="2 min", equipment=BB, muscle_group=PUSH,
                 instructions="Retract the shoulder blades, lower the bar to the mid-chest and press back over the shoulders."),
        Exercise("Bent-Over Row", 3, "8-10", rest="90 sec", equipment=BB + DB, muscle_group=PULL),
        Exercise("Overhead Press", 3, "6-8", rest="2 min", equipment=BB + DB, muscle_group="Shoulders",
                 instructions="Squeeze glutes, press the weight overhead, and finish with the biceps by the ears."),
        Exercise("Kettlebell Swing", 3, "12-15", rest="1 min", equipment=KB, muscle_group=LEGS_PULL),
        Exercise("Pull-ups", 3, "5-8", rest="2 min", equipment=BW, muscle_group=PULL,
                 instructions="Hang from the bar, pull your chest towards it, and lower under control."),
        Exercise("Farmer's Carry", 3, duration="40 m", rest="1 min", equipment=DB + KB, muscle_group="Core"),
    ),
    "upper-body": (
        Exercise("Bench Press", 4, "5-7", rest="2 min", equipment=BB, muscle_group=PUSH,
                 instructions="Retract the shoulder blades, lower the bar to the mid-chest and press back over the shoulders."),
        Exercise("Weighted Pull-ups", 4, "4-6", rest="2 min", equipment=BW, muscle_group=PULL),
        Exercise("Standing Overhead Press", 3, "5-7", rest="2 min", equipment=BB, muscle_group="Shoulders"),
        Exercise("Pendlay Row", 3, "6-8", rest="90 sec", equipment=BB, muscle_group=PULL),
        Exercise("Dumbbell Incline Press", 3, "8-10", rest="90 sec", equipment=DB, muscle_group=PUSH),
        Exercise("Close-Grip Bench Press", 3, "6-8", rest="90 sec", equipment=BB, muscle_group="Arms"),
        Exercise("Barbell Curl", 3, "8-10", rest="1 min", equipment=BB, muscle_group="Arms"),
    ),
    "lower-body": (
        Exercise("Barbell Back Squat", 5, "5", rest="3 min", equipment=BB, muscle_group=LEGS_PUSH,
                 instructions="Bar across the upper back, brace, and sit down between your heels. "
                              "Drive up through the mid-foot keeping the chest proud."),
        Exercise("Romanian Deadlift", 4, "6-8", rest="2 min", equipment=BB + DB, muscle_group=LEGS_PULL,
                 instructions="Soft knees, push the hips back until you feel the hamstrings load, then stand tall."),
        Exercise("Bulgarian Split Squat", 3, "6-8", rest="90 sec", equipment=DB, muscle_group=LEGS_PUSH),
        Exercise("Leg Press", 3, "8-10", rest="2 min", equipment=MACHINE, muscle_group=LEGS_PUSH),
        Exercise("Hip Thrust", 3, "8-10", rest="90 sec", equipment=BB, muscle_group=LEGS_PULL),
        Exercise("Standing Calf Raise", 4, "10-12", rest="1 min", equipment=MACHINE + DB, muscle_group=LEGS_PUSH),
        Exercise("Hanging Leg Raise", 3, "8-10", rest="1 min", equipment=BW, muscle_group="Core"),
    ),
    "push": (
        Exercise("Bench Press", 5, "5", rest="3 min", equipment=BB, muscle_group=PUSH),
        Exercise("Overhead Press", 4, "5-7", rest="2 min", equipment=BB, muscle_group="Shoulders"),
        Exercise("Weighted Dips", 3, "6-8", rest="2 min", equipment=BW, muscle_group=PUSH),
        Exercise("Incline Dumbbell Press", 3, "8-10", rest="90 sec", equipment=DB, muscle_group=PUSH),
        Exercise("Skull Crushers", 3, "8-10", rest="1 min", equipment=BB + DB, muscle_group="Arms"),
        Exercise("Front Squat", 4, "5-6", rest="2 min", equipment=BB, muscle_group=LEGS_PUSH),
    ),
    "pull": (
        Exercise("Deadlift", 5, "3-5", rest="3 min", equipment=BB, muscle_group=LEGS_PULL,
                 instructions="Hinge to grip the bar, pull the slack out, and stand up by pushing the floor away."),
        Exercise("Weighted Chin-ups", 4, "4-6", rest="2 min", equipment=BW, muscle_group=PULL),
        Exercise("Barbell Row", 4, "6-8", rest="2 min", equipment=BB, muscle_group=PULL),
        Exercise("Seated Cable Row", 3, "8-10", rest="90 sec", equipment=CABLE, muscle_group=PULL),
        Exercise("Face Pull", 3, "12-15", rest="1 min", equipment=CABLE + BANDS, muscle_group="Shoulders"),
        Exercise("Hammer Curl", 3, "8-10", rest="1 min", equipment=DB, muscle_group="Arms"),
    ),
    "split": (
        Exercise("Bench Press", 4, "6-8", rest="2 min", equipment=BB, muscle_group=PUSH),
        Exercise("Barbell Row", 4, "6-8", rest="2 min", equipment=BB, muscle_group=PULL),
        Exercise("Barbell Back Squat", 4, "6-8", rest="2 min", equipment=BB, muscle_group=LEGS_PUSH),
        Exercise("Romanian Deadlift", 3, "8-10", rest="2 min", equipment=BB, muscle_group=LEGS_PULL),
        Exercise("Arnold Press", 3, "8-10", rest="90 sec", equipment=DB, muscle_group="Shoulders"),
        Exercise("Ab Wheel Rollout", 3, "8-10", rest="1 min", equipment=BW, muscle_group="Core"),
    ),
}


# ═══════════════════════════════════════════
# HYPERTROPHY
# ═══════════════════════════════════════════

HYPERTROPHY = {
    "full-body": (
        Exercise("Goblet Squat", 3, "10-12", rest="90 sec", equipment=DB + KB, muscle_group=LEGS_PUSH,
                 instructions="Hold the weight at your chest, squat between your knees and stand tall."),
        Exercise("Dumbbell Bench Press", 3, "10-12", rest="90 sec", equipment=DB, muscle_group=PUSH),
        Exercise("Lat Pulldown", 3, "10-12", rest="90 sec", equipment=CABLE + MACHINE, muscle_group=PULL),
        Exercise("Dumbbell Romanian Deadlift", 3, "10-12", rest="90 sec", equipment=DB, muscle_group=LEGS_PULL),
        Exercise("Lateral Raise", 3, "12-15", rest="1 min", equipment=DB + CABLE, muscle_group="Shoulders"),
        Exercise("Push-ups", 3, "12-15", rest="1 min", equipment=BW, muscle_group=PUSH),
        Exercise("Cable Crunch", 3, "12-15", rest="1 min", equipment=CABLE, muscle_group="Core"),
        Exercise("Dumbbell Curl", 3, "10-12", rest="1 min", equipment=DB, muscle_group="Arms"),
    ),
    "upper-body": (
        Exercise("Incline Dumbbell Press", 4, "8-12", rest="90 sec", equipment=DB, muscle_group=PUSH),
        Exercise("Chest-Supported Row", 4, "8-12", rest="90 sec", equipment=DB + MACHINE, muscle_group=PULL),
        Exercise("Cable Fly", 3, "12-15", rest="1 min", equipment=CABLE, muscle_group=PUSH),
        Exercise("Lat Pulldown", 3, "10-12", rest="90 sec", equipment=CABLE + MACHINE, muscle_group=PULL),
        Exercise("Lateral Raise", 4, "12-15", rest="1 min", equipment=DB, muscle_group="Shoulders"),
        Exercise("EZ-Bar Curl", 3, "10-12", rest="1 min", equipment=BB, muscle_group="Arms"),
        Exercise("Rope Triceps Pushdown", 3, "12-15", rest="1 min", equipment=CABLE, muscle_group="Arms"),
    ),
    "lower-body": (
        Exercise("Hack Squat", 4, "8-12", rest="2 min", equipment=MACHINE, muscle_group=LEGS_PUSH),
        Exercise("Romanian Deadlift", 4, "8-10", rest="2 min", equipment=BB + DB, muscle_group=LEGS_PULL),
        Exercise("Walking Lunges", 3, "10-12", rest="90 sec", equipment=DB + BW, muscle_group=LEGS_PUSH),
        Exercise("Leg Extension", 3, "12-15", rest="1 min", equipment=MACHINE, muscle_group=LEGS_PUSH),
        Exercise("Lying Leg Curl", 3, "10-12", rest="1 min", equipment=MACHINE, muscle_group=LEGS_PULL),
        Exercise("Seated Calf Raise", 4, "12-15", rest="1 min", equipment=MACHINE, muscle_group=LEGS_PUSH),
    ),
    "push": (
        Exercise("Flat Barbell Bench Press", 4, "8-10", rest="2 min", equipment=BB, muscle_group=PUSH),
        Exercise("Seated Dumbbell Shoulder Press", 3, "8-12", rest="90 sec", equipment=DB, muscle_group="Shoulders"),
        Exercise("Machine Chest Press", 3, "10-12", rest="90 sec", equipment=MACHINE, muscle_group=PUSH),
        Exercise("Cable Lateral Raise", 3, "12-15", rest="1 min", equipment=CABLE, muscle_group="Shoulders"),
        Exercise("Overhead Triceps Extension", 3, "10-12", rest="1 min", equipment=DB + CABLE, muscle_group="Arms"),
        Exercise("Diamond Push-ups", 3, "10-15", rest="1 min", equipment=BW, muscle_group="Arms"),
        Exercise("Leg Press", 3, "10-12", rest="2 min", equipment=MACHINE, muscle_group=LEGS_PUSH),
    ),
    "pull": (
        Exercise("Pull-ups", 4, "6-10", rest="2 min", equipment=BW, muscle_group=PULL),
        Exercise("One-Arm Dumbbell Row", 3, "10-12", rest="90 sec", equipment=DB, muscle_group=PULL),
        Exercise("Straight-Arm Pulldown", 3, "12-15", rest="1 min", equipment=CABLE, muscle_group=PULL),
        Exercise("Rear Delt Fly", 3, "12-15", rest="1 min", equipment=DB + CABLE, muscle_group="Shoulders"),
        Exercise("Incline Dumbbell Curl", 3, "10-12", rest="1 min", equipment=DB, muscle_group="Arms"),
        Exercise("Seated Leg Curl", 3, "10-12", rest="1 min", equipment=MACHINE, muscle_group=LEGS_PULL),
    ),
    "split": (
        Exercise("Incline Barbell Press", 4, "8-10", rest="2 min", equipment=BB, muscle_group=PUSH),
        Exercise("Cable Row", 4, "10-12", rest="90 sec", equipment=CABLE, muscle_group=PULL),
        Exercise("Leg Press", 4, "10-12", rest="2 min", equipment=MACHINE, muscle_group=LEGS_PUSH),
        Exercise("Lying Leg Curl", 3, "10-12", rest="1 min", equipment=MACHINE, muscle_group=LEGS_PULL),
        Exercise("Lateral Raise", 3, "12-15", rest="1 min", equipment=DB, muscle_group="Shoulders"),
        Exercise("Preacher Curl", 3, "10-12", rest="1 min", equipment=BB + MACHINE, muscle_group="Arms"),
        Exercise("Hanging Knee Raise", 3, "12-15", rest="1 min", equipment=BW, muscle_group="Core"),
    ),
}


# ═══════════════════════════════════════════
# CARDIO
# ═══════════════════════════════════════════

CARDIO = {
    "full-body": (
        Exercise("Jumping Jacks", 3, duration="45 sec", rest="15 sec", equipment=BW,
                 instructions="Jump your feet wide while sweeping your arms overhead, then jump back in."),
        Exercise("Burpees", 3, "10-12", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH,
                 instructions="Squat, kick back to a plank, return your feet, and jump up with arms overhead."),
        Exercise("Mountain Climbers", 3, duration="40 sec", rest="20 sec", equipment=BW, muscle_group="Core"),
        Exercise("Kettlebell Swing", 3, "15-20", rest="30 sec", equipment=KB, muscle_group=LEGS_PULL),
        Exercise("Medicine Ball Slam", 3, "10-12", rest="30 sec", equipment=("medicine ball",), muscle_group="Core"),
        Exercise("High Knees", 3, duration="30 sec", rest="15 sec", equipment=BW),
        Exercise("TRX Jump Squat", 3, "10-12", rest="30 sec", equipment=("trx",), muscle_group=LEGS_PUSH),
    ),
    "upper-body": (
        Exercise("Battle Rope Waves", 4, duration="30 sec", rest="30 sec", equipment=BANDS + CABLE, muscle_group="Shoulders"),
        Exercise("Shadow Boxing", 3, duration="60 sec", rest="20 sec", equipment=BW, muscle_group="Shoulders"),
        Exercise("Plank Shoulder Taps", 3, "16-20", rest="20 sec", equipment=BW, muscle_group="Core"),
        Exercise("Medicine Ball Chest Pass", 3, "12-15", rest="30 sec", equipment=("medicine ball",), muscle_group=PUSH),
        Exercise("Band Pull-Apart", 3, "15-20", rest="20 sec", equipment=BANDS, muscle_group=PULL),
        Exercise("Push-up to Renegade Row", 3, "8-10", rest="30 sec", equipment=DB, muscle_group=PULL),
    ),
    "lower-body": (
        Exercise("Jump Squats", 3, "12-15", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH,
                 instructions="Squat to parallel then explode upward, landing softly into the next rep."),
        Exercise("Alternating Jump Lunges", 3, "10-12", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Skater Hops", 3, duration="40 sec", rest="20 sec", equipment=BW, muscle_group=LEGS_PULL),
        Exercise("Kettlebell Goblet Squat Pulse", 3, "15-20", rest="30 sec", equipment=KB, muscle_group=LEGS_PUSH),
        Exercise("Box Step-ups", 3, "12-14", rest="30 sec", equipment=BW + DB, muscle_group=LEGS_PUSH),
        Exercise("Glute Bridge March", 3, "16-20", rest="20 sec", equipment=BW + MAT, muscle_group=LEGS_PULL),
    ),
    "push": (
        Exercise("Burpees", 3, "10-12", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Plyo Push-ups", 3, "6-8", rest="45 sec", equipment=BW, muscle_group=PUSH),
        Exercise("Thrusters", 3, "10-12", rest="45 sec", equipment=DB + BB, muscle_group="Shoulders"),
        Exercise("Jump Squats", 3, "12-15", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Medicine Ball Chest Pass", 3, "12-15", rest="30 sec", equipment=("medicine ball",), muscle_group=PUSH),
    ),
    "pull": (
        Exercise("Rowing Machine Intervals", 4, duration="2 min", rest="1 min", equipment=MACHINE, muscle_group=PULL),
        Exercise("Kettlebell Swing", 3, "15-20", rest="30 sec", equipment=KB, muscle_group=LEGS_PULL),
        Exercise("TRX Row", 3, "12-15", rest="30 sec", equipment=("trx",), muscle_group=PULL),
        Exercise("Battle Rope Slams", 3, duration="30 sec", rest="30 sec", equipment=BANDS + CABLE, muscle_group=PULL),
        Exercise("Skater Hops", 3, duration="40 sec", rest="20 sec", equipment=BW, muscle_group=LEGS_PULL),
    ),
    "split": (
        Exercise("Jump Rope", 4, duration="60 sec", rest="30 sec", equipment=BW),
        Exercise("Burpees", 3, "10-12", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Rowing Machine Intervals", 3, duration="2 min", rest="1 min", equipment=MACHINE, muscle_group=PULL),
        Exercise("Mountain Climbers", 3, duration="40 sec", rest="20 sec", equipment=BW, muscle_group="Core"),
        Exercise("Shadow Boxing", 3, duration="60 sec", rest="20 sec", equipment=BW, muscle_group="Shoulders"),
        Exercise("Skater Hops", 3, duration="40 sec", rest="20 sec", equipment=BW, muscle_group=LEGS_PULL),
    ),
}


# ═══════════════════════════════════════════
# FLEXIBILITY
# ═══════════════════════════════════════════

FLEXIBILITY = {
    "full-body": (
        Exercise("Cat-Cow", 2, "10-12", rest="15 sec", equipment=MAT, muscle_group="Core",
                 instructions="On hands and knees, round the spine towards the ceiling then let the belly sink, moving with the breath."),
        Exercise("World's Greatest Stretch", 2, "5-6", rest="15 sec", equipment=BW, muscle_group=LEGS_PULL),
        Exercise("Downward Dog", 2, duration="45 sec", rest="15 sec", equipment=MAT, muscle_group=LEGS_PULL),
        Exercise("Thoracic Foam Roll", 2, duration="60 sec", rest="15 sec", equipment=ROLLER, muscle_group=PULL),
        Exercise("Thread the Needle", 2, "8-10", rest="15 sec", equipment=MAT, muscle_group="Shoulders"),
        Exercise("Child's Pose", 2, duration="60 sec", rest="15 sec", equipment=MAT),
        Exercise("Band Shoulder Dislocates", 2, "10-12", rest="15 sec", equipment=BANDS, muscle_group="Shoulders"),
    ),
    "upper-body": (
        Exercise("Doorway Chest Stretch", 2, duration="45 sec", rest="15 sec", equipment=BW, muscle_group=PUSH),
        Exercise("Band Shoulder Dislocates", 2, "10-12", rest="15 sec", equipment=BANDS, muscle_group="Shoulders"),
        Exercise("Thread the Needle", 2, "8-10", rest="15 sec", equipment=MAT, muscle_group=PULL),
        Exercise("Overhead Triceps Stretch", 2, duration="30 sec", rest="15 sec", equipment=BW, muscle_group="Arms"),
        Exercise("Lat Foam Roll", 2, duration="60 sec", rest="15 sec", equipment=ROLLER, muscle_group=PULL),
    ),
    "lower-body": (
        Exercise("90/90 Hip Switch", 2, "8-10", rest="15 sec", equipment=MAT, muscle_group=LEGS_PULL,
                 instructions="Sit with both knees bent at 90 degrees and rotate your legs side to side without using your hands."),
        Exercise("Couch Stretch", 2, duration="45 sec", rest="15 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Seated Hamstring Stretch", 2, duration="45 sec", rest="15 sec", equipment=MAT, muscle_group=LEGS_PULL),
        Exercise("Pigeon Pose", 2, duration="60 sec", rest="15 sec", equipment=MAT, muscle_group=LEGS_PULL),
        Exercise("Quad Foam Roll", 2, duration="60 sec", rest="15 sec", equipment=ROLLER, muscle_group=LEGS_PUSH),
        Exercise("Wall Calf Stretch", 2, duration="30 sec", rest="15 sec", equipment=BW, muscle_group=LEGS_PUSH),
    ),
    "split": (
        Exercise("Cat-Cow", 2, "10-12", rest="15 sec", equipment=MAT, muscle_group="Core"),
        Exercise("Cobra Stretch", 2, duration="30 sec", rest="15 sec", equipment=MAT, muscle_group="Core"),
        Exercise("Pigeon Pose", 2, duration="60 sec", rest="15 sec", equipment=MAT, muscle_group=LEGS_PULL),
        Exercise("Doorway Chest Stretch", 2, duration="45 sec", rest="15 sec", equipment=BW, muscle_group=PUSH),
        Exercise("Child's Pose", 2, duration="60 sec", rest="15 sec", equipment=MAT),
    ),
}


# ═══════════════════════════════════════════
# ENDURANCE
# ═══════════════════════════════════════════

ENDURANCE = {
    "full-body": (
        Exercise("Bodyweight Squats", 3, "20-25", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH,
                 instructions="Sit back and down to parallel, then stand tall. Keep a steady, sustainable tempo."),
        Exercise("Push-ups", 3, "15-20", rest="30 sec", equipment=BW, muscle_group=PUSH),
        Exercise("Inverted Row", 3, "12-15", rest="30 sec", equipment=BW + ("trx",), muscle_group=PULL),
        Exercise("Walking Lunges", 3, "20-24", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Plank", 3, duration="60 sec", rest="30 sec", equipment=BW, muscle_group="Core"),
        Exercise("Kettlebell Swing", 3, "20-25", rest="45 sec", equipment=KB, muscle_group=LEGS_PULL),
        Exercise("Band Face Pull", 3, "20-25", rest="30 sec", equipment=BANDS, muscle_group="Shoulders"),
    ),
    "upper-body": (
        Exercise("Push-ups", 4, "15-20", rest="30 sec", equipment=BW, muscle_group=PUSH),
        Exercise("TRX Row", 4, "15-20", rest="30 sec", equipment=("trx",), muscle_group=PULL),
        Exercise("Dumbbell Shoulder Press", 3, "15-18", rest="45 sec", equipment=DB, muscle_group="Shoulders"),
        Exercise("Band Curl", 3, "20-25", rest="30 sec", equipment=BANDS, muscle_group="Arms"),
        Exercise("Bench Dips", 3, "15-20", rest="30 sec", equipment=BW, muscle_group="Arms"),
        Exercise("Hollow Hold", 3, duration="30 sec", rest="30 sec", equipment=BW + MAT, muscle_group="Core"),
    ),
    "lower-body": (
        Exercise("Wall Sit", 3, duration="60 sec", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Step-ups", 3, "15-20", rest="30 sec", equipment=BW + DB, muscle_group=LEGS_PUSH),
        Exercise("Single-Leg Glute Bridge", 3, "15-20", rest="30 sec", equipment=BW + MAT, muscle_group=LEGS_PULL),
        Exercise("Reverse Lunges", 3, "16-20", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("Kettlebell Deadlift", 3, "15-20", rest="45 sec", equipment=KB, muscle_group=LEGS_PULL),
        Exercise("Calf Raises", 3, "25-30", rest="30 sec", equipment=BW),
    ),
    "split": (
        Exercise("Push-ups", 3, "15-20", rest="30 sec", equipment=BW, muscle_group=PUSH),
        Exercise("Bodyweight Squats", 3, "20-25", rest="30 sec", equipment=BW, muscle_group=LEGS_PUSH),
        Exercise("TRX Row", 3, "15-20", rest="30 sec", equipment=("trx",), muscle_group=PULL),
        Exercise("Dead Bug", 3, "12-16", rest="30 sec", equipment=MAT, muscle_group="Core"),
        Exercise("Glute Bridge", 3, "20-25", rest="30 sec", equipment=BW, muscle_group=LEGS_PULL),
    ),
}


CATALOG = MappingProxyType({
    "strength": MappingProxyType(STRENGTH),
    "hypertrophy": MappingProxyType(HYPERTROPHY),
    "cardio": MappingProxyType(CARDIO),
    "flexibility": MappingProxyType(FLEXIBILITY),
    "endurance": MappingProxyType(ENDURANCE),
})
