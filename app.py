"""Script entry point: run the pressure diffusion demo."""

from pressure_fields.examples.pressure_demo import main

if __name__ == "__main__":
    main()
