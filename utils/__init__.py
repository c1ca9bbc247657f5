"""Map building utilities: classifiers, cluster icons, legend, loading and rendering"""
